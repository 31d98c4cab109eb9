from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class PlaygroundUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    displayName: Any = None


class PlaygroundImage(BaseModel):
    """One entry of the upstream result array.

    ``user`` is required: an entry without it fails validation and is
    reported as an upstream fault, not as an empty result.
    """

    model_config = ConfigDict(extra="ignore")

    title: Any = None
    prompt: Any = None
    user: PlaygroundUser
    url: Any = None


class PlaygroundPageProps(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Entries are validated lazily; only the first one is ever read.
    data: list[Any] | None = None


class PlaygroundSearchPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pageProps: PlaygroundPageProps | None = None

    def results(self) -> list[Any]:
        if self.pageProps is None or not self.pageProps.data:
            return []
        return self.pageProps.data
