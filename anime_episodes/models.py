"""
Data models for the anime episode scraper.

An Episode is what we pull out of a single episode link on an anime's
listing page. It is immutable once created.
"""

from pydantic import BaseModel, ConfigDict, Field


class Episode(BaseModel):
    """
    Represents an episode link scraped from an anime's page.

    The display text is kept exactly as it appeared on the page; the
    numeric value is only used for ordering.
    """
    model_config = ConfigDict(frozen=True)

    number: str = Field(description="Episode label as rendered on the page")
    num: int = Field(description="First run of digits in the label, used for sorting")
    url: str = Field(default="", description="Link target of the episode, empty if missing")

    def to_dict(self) -> dict:
        """
        Convert the episode to a plain dictionary.

        Returns:
            dict: Episode data with keys number, num, url
        """
        return {
            'number': self.number,
            'num': self.num,
            'url': self.url
        }


# Type alias for clarity
EpisodeList = list[Episode]
