from typing import Any

from pydantic import BaseModel, ConfigDict


class Meme(BaseModel):
    """One entry of the upstream meme list.

    The helpers pass upstream records through as plain dicts; this is the
    typed form callers may hand to ``filter_memes_by_name`` and
    ``download_random_meme_image`` instead (``Meme.model_validate(record)``).
    Fields the upstream adds beyond these are kept as-is.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    name: str
    url: str
    width: int | None = None
    height: int | None = None
    box_count: int | None = None
    captions: int | None = None


def meme_field(meme: Meme | dict[str, Any], field: str) -> Any:
    """Read a field from either a raw upstream dict or a Meme."""
    if isinstance(meme, dict):
        return meme.get(field)
    return getattr(meme, field, None)
