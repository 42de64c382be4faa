import asyncio

import pytest

from conftest import json_response
from github_org.errors import PaginationLimitError, UnexpectedResponseError
from github_org.pagination import extract_next_from_link, fetch_paginated


def _link(next_url=None, last_url="orgs/navikt/repos?per_page=100&page=17"):
    segments = []
    if next_url:
        segments.append(f'<{next_url}>; rel="next"')
    segments.append(f'<{last_url}>; rel="last"')
    return {"Link": ", ".join(segments)}


def test_extract_next_from_link():
    header = '<orgs/navikt/repos?per_page=100&page=2>; rel="next", <orgs/navikt/repos?per_page=100&page=17>; rel="last"'
    assert extract_next_from_link(header) == "orgs/navikt/repos?per_page=100&page=2"


def test_extract_next_when_not_first_segment():
    header = '<https://api.github.com/x?page=1>; rel="prev", <https://api.github.com/x?page=3>; rel="next"'
    assert extract_next_from_link(header) == "https://api.github.com/x?page=3"


@pytest.mark.parametrize(
    "header",
    [
        None,
        "",
        '<https://api.github.com/x?page=17>; rel="last"',
        '<https://api.github.com/x?page=1>; rel="prev", <https://api.github.com/x?page=1>; rel="first"',
        '<https://api.github.com/x?page=2>; rel="nextpage"',
    ],
)
def test_extract_next_absent(header):
    assert extract_next_from_link(header) is None


def test_extract_next_requires_exact_relation():
    assert extract_next_from_link('<https://api.github.com/x?page=2>; rel="next last"') is None
    assert extract_next_from_link('<https://api.github.com/x?page=9>; rel="nextpage"') is None


def test_extract_next_with_comma_in_url():
    header = (
        '<https://api.github.com/search?q=a,b&page=1>; rel="prev", '
        '<https://api.github.com/search?q=a,b&page=3>; rel="next"'
    )
    assert extract_next_from_link(header) == "https://api.github.com/search?q=a,b&page=3"


def test_fetch_paginated_concatenates_pages_in_order(fake_api):
    api = fake_api(
        [
            json_response([{"id": 1}, {"id": 2}], headers=_link("orgs/navikt/repos?per_page=100&page=2")),
            json_response([{"id": 3}], headers=_link("orgs/navikt/repos?per_page=100&page=3")),
            json_response([{"id": 4}, {"id": 5}], headers=_link()),
        ]
    )

    items = asyncio.run(fetch_paginated(api, "orgs/navikt/repos"))

    assert items == [{"id": 1}, {"id": 2}, {"id": 3}, {"id": 4}, {"id": 5}]
    assert [entry["path"] for entry in api.history] == [
        "orgs/navikt/repos",
        "orgs/navikt/repos?per_page=100&page=2",
        "orgs/navikt/repos?per_page=100&page=3",
    ]


def test_fetch_paginated_only_sends_page_size_on_first_request(fake_api):
    api = fake_api(
        [
            json_response([{"id": 1}], headers=_link("orgs/navikt/repos?per_page=50&page=2")),
            json_response([{"id": 2}]),
        ]
    )

    asyncio.run(fetch_paginated(api, "orgs/navikt/repos", per_page=50))

    assert api.history[0]["params"] == {"per_page": 50}
    assert api.history[1]["params"] is None


def test_fetch_paginated_single_page_without_link_header(fake_api):
    api = fake_api([json_response([])])
    assert asyncio.run(fetch_paginated(api, "orgs/navikt/members")) == []
    assert len(api.history) == 1


def test_fetch_paginated_rejects_non_array_body(fake_api):
    api = fake_api([json_response({"message": "nope"})])
    with pytest.raises(UnexpectedResponseError):
        asyncio.run(fetch_paginated(api, "orgs/navikt/repos"))


def test_fetch_paginated_stops_at_page_cap(fake_api):
    endless = [json_response([{"id": i}], headers=_link(f"orgs/navikt/repos?page={i + 1}")) for i in range(5)]
    api = fake_api(endless)

    with pytest.raises(PaginationLimitError):
        asyncio.run(fetch_paginated(api, "orgs/navikt/repos", max_pages=3))

    assert len(api.history) == 3
