# backend/slugs.py

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify_title(text: str) -> str:
    """
    "Hot Rolled Coil: Q3 Outlook!" -> "hot-rolled-coil-q3-outlook"
    """
    return _NON_ALNUM.sub("-", (text or "").lower()).strip("-")


def unique_slug(model, text: str, *, exclude_pk=None, field: str = "slug") -> str:
    """
    Base slug, then base-2, base-3 ... until no other row holds it.
    """
    base = slugify_title(text) or "item"
    candidate = base
    i = 1

    qs = model.objects.all()
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)

    while qs.filter(**{field: candidate}).exists():
        i += 1
        candidate = f"{base}-{i}"
    return candidate
