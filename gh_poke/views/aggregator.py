"""Aggregation of the search views shown by gh-poke."""

import asyncio
import logging
from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel, Field

from ..config import PokeConfig
from ..exceptions import NoOrganizationError, TransportError
from ..github_client.models import RemoteItem
from ..github_client.search import (
    build_assigned_query,
    build_done_query,
    build_mentioned_query,
    build_review_requested_query,
    build_reviewed_query,
    build_team_review_query,
)
from .dedup import merge_reviews
from .prioritizer import Prioritizer

logger = logging.getLogger(__name__)

REASON_REVIEW_REQUESTED = "review-requested"
REASON_TEAM_REVIEW_REQUESTED = "team-review-requested"
REASON_ASSIGNED = "assigned"
REASON_REVIEWED = "reviewed"
REASON_MENTIONED = "mentioned"


class ItemFetcher(Protocol):
    """Anything that can run a search query, such as GitHubClient."""

    def search(self, query: str) -> list[RemoteItem]: ...


class ViewSet(BaseModel):
    """Result of one aggregation run. Rebuilt on every invocation."""

    organization: str = Field(..., description="Organization the views are scoped to")
    to_review: list[RemoteItem] = Field(default_factory=list)
    assigned: list[RemoteItem] = Field(default_factory=list)
    done: list[RemoteItem] = Field(default_factory=list)
    reviewed: list[RemoteItem] = Field(default_factory=list)
    mentioned: list[RemoteItem] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return (
            len(self.to_review)
            + len(self.assigned)
            + len(self.done)
            + len(self.reviewed)
            + len(self.mentioned)
        )

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def resolve_organization(organization: str | None, work_orgs: Sequence[str]) -> str:
    """Pick the organization to query.

    Raises:
        NoOrganizationError: If none is given and none is configured
    """
    if organization:
        return organization
    if work_orgs:
        return work_orgs[0]
    raise NoOrganizationError()


def _tag(items: list[RemoteItem], reason: str) -> list[RemoteItem]:
    return [item.model_copy(update={"reason": reason}) for item in items]


class ViewAggregator:
    """Runs the view queries for one organization and assembles a ViewSet."""

    def __init__(self, fetcher: ItemFetcher, config: PokeConfig):
        self.fetcher = fetcher
        self.config = config
        self.prioritizer = Prioritizer(config.work_orgs)

    async def _search(self, query: str, reason: str) -> list[RemoteItem]:
        items = await asyncio.to_thread(self.fetcher.search, query)
        return _tag(items, reason)

    async def _fetch_team_reviews(
        self, organization: str, work_teams: Sequence[str]
    ) -> list[RemoteItem]:
        """Fetch team review requests one team at a time.

        A failing team is logged and skipped so the other teams still count.
        """
        team_reviews: list[RemoteItem] = []
        for team in work_teams:
            query = build_team_review_query(organization, team)
            try:
                team_reviews.extend(
                    await self._search(query, REASON_TEAM_REVIEW_REQUESTED)
                )
            except TransportError as e:
                logger.warning("Error fetching team %s reviews: %s", team, e)
        return team_reviews

    async def aggregate(
        self,
        organization: str | None = None,
        work_teams: Sequence[str] | None = None,
    ) -> ViewSet:
        """Fetch every view for an organization.

        The personal queries run concurrently and the first failure aborts the
        run. Team queries follow and tolerate individual failures.

        Args:
            organization: Organization to scope the queries to; defaults to the
                first configured work organization
            work_teams: Teams whose review requests to include; defaults to the
                configured teams

        Returns:
            ViewSet with the review queue deduplicated and prioritized

        Raises:
            NoOrganizationError: If no organization can be resolved
            TransportError: If any personal query fails
        """
        org = resolve_organization(organization, self.config.work_orgs)
        teams = self.config.work_teams if work_teams is None else work_teams
        logger.info("Using organization: %s", org)

        assigned, done, personal_reviews, reviewed, mentioned = await asyncio.gather(
            self._search(build_assigned_query(org), REASON_ASSIGNED),
            self._search(build_done_query(org), REASON_ASSIGNED),
            self._search(build_review_requested_query(org), REASON_REVIEW_REQUESTED),
            self._search(build_reviewed_query(org), REASON_REVIEWED),
            self._search(build_mentioned_query(org), REASON_MENTIONED),
        )

        team_reviews = await self._fetch_team_reviews(org, teams)
        to_review = self.prioritizer.prioritize(
            merge_reviews(personal_reviews, team_reviews)
        )

        return ViewSet(
            organization=org,
            to_review=to_review,
            assigned=assigned,
            done=done,
            reviewed=reviewed,
            mentioned=mentioned,
        )
