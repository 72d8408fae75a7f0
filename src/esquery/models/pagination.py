"""Pagination value model."""

from pydantic import BaseModel, ConfigDict, Field


class Pagination(BaseModel):
    """A validated page request.

    Satisfies the ``PaginationSource`` protocol consumed by
    ``QueryBuilder.set_pagination``.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1, description="1-indexed page number")
    results_per_page: int = Field(default=10, ge=0, description="Number of hits per page")

    @property
    def offset(self) -> int:
        """Index of the first hit on this page."""
        return (self.page - 1) * self.results_per_page
