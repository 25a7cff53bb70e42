# =============================================================================
# core/services/score_service.py - Match Scores
# =============================================================================
# Loads categories, weights and ratings from the database and runs them
# through the scoring aggregator (lib/scoring.py).
#
# Reads are independent queries; a score may reflect a weight saved a
# moment ago or not, and the next request catches up.
# =============================================================================

import logging
from collections import defaultdict
from typing import Iterable
from uuid import UUID

from lib.scoring import average_score, score_house, score_label
from lib.supabase_client import SupabaseClient
from core.models import (
    CategoryAverage,
    HouseholdHouseScore,
    HouseholdUser,
    HouseScore,
    MemberHouseScore,
)
from core.services.category_service import CategoryService
from core.services.house_service import HouseService
from core.services.household_service import HouseholdService
from core.services.weight_service import WeightService

logger = logging.getLogger(__name__)


class ScoreService:
    """Service computing match scores for houses."""

    @staticmethod
    def score_house(member: HouseholdUser, house_id: UUID | str) -> HouseScore:
        """The member's match score for one house."""
        house = HouseService.get_house(member, house_id)
        categories = CategoryService.list_categories(member, active_only=True)
        weights = WeightService.get_weight_map(member.id)
        rows = SupabaseClient.fetch_rows(
            "house_ratings",
            filters={"household_user_id": member.id, "house_id": house.id},
            columns="category_id, rating",
        )
        ratings = {row["category_id"]: row["rating"] for row in rows}

        return score_house(house.id, categories, weights, ratings, member.id)

    @staticmethod
    def score_houses(
        member: HouseholdUser,
        house_ids: Iterable[UUID | str],
    ) -> list[HouseScore]:
        """
        The member's match score for several houses.

        Categories and weights are loaded once and ratings with a single
        query, so this is what the houses list uses.
        """
        house_ids = [str(house_id) for house_id in house_ids]
        if not house_ids:
            return []

        categories = CategoryService.list_categories(member, active_only=True)
        weights = WeightService.get_weight_map(member.id)
        rows = SupabaseClient.fetch_rows(
            "house_ratings",
            filters={"household_user_id": member.id},
            in_filters={"house_id": house_ids},
            columns="house_id, category_id, rating",
        )

        ratings_by_house: dict[str, dict[str, int | None]] = defaultdict(dict)
        for row in rows:
            ratings_by_house[str(row["house_id"])][row["category_id"]] = row["rating"]

        return [
            score_house(house_id, categories, weights, ratings_by_house[house_id], member.id)
            for house_id in house_ids
        ]

    @staticmethod
    def household_scores(member: HouseholdUser, house_id: UUID | str) -> HouseholdHouseScore:
        """
        Every household member's score for a house, with the household mean.

        Each member is scored with their own weights. Members with no
        scorable categories are listed as "Not rated" and left out of the
        average.
        """
        house = HouseService.get_house(member, house_id)
        categories = CategoryService.list_categories(member, active_only=True)
        members = HouseholdService.list_members(member)
        member_ids = [str(m.id) for m in members]

        weight_rows = SupabaseClient.fetch_rows(
            "category_weights",
            in_filters={"household_user_id": member_ids},
            columns="household_user_id, category_id, weight",
        )
        rating_rows = SupabaseClient.fetch_rows(
            "house_ratings",
            filters={"house_id": house.id},
            in_filters={"household_user_id": member_ids},
            columns="household_user_id, category_id, rating",
        )

        weights: dict[str, dict[str, int]] = defaultdict(dict)
        for row in weight_rows:
            weights[str(row["household_user_id"])][row["category_id"]] = row["weight"]
        ratings: dict[str, dict[str, int | None]] = defaultdict(dict)
        for row in rating_rows:
            ratings[str(row["household_user_id"])][row["category_id"]] = row["rating"]

        member_scores = []
        for m in members:
            score = score_house(
                house.id, categories, weights[str(m.id)], ratings[str(m.id)], m.id
            )
            member_scores.append(
                MemberHouseScore(
                    household_user_id=m.id,
                    name=m.name,
                    overall_score=score.overall_score,
                    label=score.label,
                    rated_count=score.rated_count,
                )
            )

        household_average = average_score(s.overall_score for s in member_scores)
        return HouseholdHouseScore(
            house_id=house.id,
            household_average=household_average,
            label=score_label(household_average),
            members=member_scores,
        )

    @staticmethod
    def category_averages(member: HouseholdUser) -> list[CategoryAverage]:
        """Mean weight per active category across members who set one."""
        categories = CategoryService.list_categories(member, active_only=True)
        member_ids = [str(m.id) for m in HouseholdService.list_members(member)]
        rows = SupabaseClient.fetch_rows(
            "category_weights",
            in_filters={"household_user_id": member_ids},
            columns="category_id, weight",
        )

        by_category: dict[str, list[int]] = defaultdict(list)
        for row in rows:
            if row.get("weight") is not None:
                by_category[str(row["category_id"])].append(row["weight"])

        averages = []
        for category in categories:
            values = by_category.get(str(category.id), [])
            averages.append(
                CategoryAverage(
                    category_id=category.id,
                    category_name=category.name,
                    category_group=category.category_group,
                    average_weight=sum(values) / len(values) if values else None,
                    user_count=len(values),
                )
            )
        return averages
