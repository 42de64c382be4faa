"""GraphQL query documents."""

PAGE_INFO_FRAGMENT = """
fragment PageInfoFields on PageInfo {
  startCursor
  endCursor
  hasNextPage
}
"""

EXTERNAL_IDENTITIES_QUERY = f"""
{PAGE_INFO_FRAGMENT}
query ($login: String!, $first: Int = 100, $after: String) {{
  organization(login: $login) {{
    samlIdentityProvider {{
      externalIdentities(first: $first, after: $after) {{
        pageInfo {{
          ...PageInfoFields
        }}
        nodes {{
          samlIdentity {{
            nameId
          }}
          user {{
            login
          }}
        }}
      }}
    }}
  }}
}}
"""

EXTERNAL_IDENTITIES_PATH = ("organization", "samlIdentityProvider", "externalIdentities")
