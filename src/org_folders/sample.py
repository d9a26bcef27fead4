"""Deterministic sample folder data."""

from __future__ import annotations

import random
import uuid
from typing import Optional, Sequence

from .models import Folder

DEFAULT_ORG_ID = "c1556e17-b7c0-45a3-a6ae-9546248fb17a"
SECONDARY_ORG_ID = "52214b35-f4da-461a-9f93-fbd3590e700f"

_ADJECTIVES = [
    "amber", "brisk", "calm", "daring", "eager", "fancy", "gentle", "humble",
    "jolly", "keen", "lively", "merry", "noble", "proud", "quiet", "rapid",
]
_NOUNS = [
    "falcon", "harbor", "meadow", "quill", "ridge", "sparrow", "summit", "tundra",
    "willow", "zephyr", "canyon", "ember", "glacier", "lantern", "orchard", "prism",
]


def _random_uuid(rng: random.Random) -> uuid.UUID:
    return uuid.UUID(int=rng.getrandbits(128), version=4)


def generate_sample_folders(
    org_ids: Optional[Sequence[str]] = None,
    count: int = 1000,
    seed: int = 0,
) -> list[Folder]:
    """Generate ``count`` folders spread over ``org_ids``.

    The same arguments always produce the same folders in the same order.
    Organizations are interleaved so filtering by one of them is meaningful.
    """
    if org_ids is None:
        org_ids = [DEFAULT_ORG_ID, SECONDARY_ORG_ID]
    if not org_ids:
        raise ValueError("org_ids must not be empty")

    orgs = [uuid.UUID(str(o)) for o in org_ids]
    rng = random.Random(seed)

    folders = []
    for _ in range(count):
        name = f"{rng.choice(_ADJECTIVES)}-{rng.choice(_NOUNS)}"
        folders.append(Folder(id=_random_uuid(rng), org_id=rng.choice(orgs), name=name))
    return folders
