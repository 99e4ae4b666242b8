"""Search query builders for the views gh-poke shows.

The query grammar belongs to GitHub; these helpers only compose the strings.
API Reference: https://docs.github.com/en/search-github/searching-on-github/searching-issues-and-pull-requests
"""


def _with_org(query_parts: list[str], org: str) -> str:
    query_parts.append(f"org:{org}")
    return " ".join(query_parts)


def build_assigned_query(org: str, state: str = "open") -> str:
    """Build the query for issues assigned to the authenticated user.

    Args:
        org: Organization name
        state: Issue state (open or closed)

    Returns:
        GitHub search query string

    Example:
        >>> build_assigned_query("acme")
        'is:issue state:open archived:false assignee:@me sort:updated-desc org:acme'
    """
    query_parts = ["is:issue", f"state:{state}"]
    if state == "open":
        query_parts.append("archived:false")
    query_parts.extend(["assignee:@me", "sort:updated-desc"])
    return _with_org(query_parts, org)


def build_done_query(org: str) -> str:
    """Build the query for recently closed issues assigned to the user."""
    return build_assigned_query(org, state="closed")


def build_review_requested_query(org: str) -> str:
    """Build the query for pull requests requesting the user's review.

    Example:
        >>> build_review_requested_query("acme")
        'is:pr review-requested:@me org:acme'
    """
    return _with_org(["is:pr", "review-requested:@me"], org)


def build_team_review_query(org: str, team: str) -> str:
    """Build the query for pull requests requesting a team's review.

    One query per team keeps the search syntax simple.

    Example:
        >>> build_team_review_query("acme", "backend")
        'is:pr team-review-requested:acme/backend org:acme'
    """
    return _with_org(["is:pr", f"team-review-requested:{org}/{team}"], org)


def build_reviewed_query(org: str) -> str:
    """Build the query for pull requests the user has reviewed."""
    return _with_org(["is:pr", "reviewed-by:@me"], org)


def build_mentioned_query(org: str) -> str:
    """Build the query for open pull requests mentioning the user."""
    return _with_org(["is:pr", "is:open", "mentions:@me"], org)
