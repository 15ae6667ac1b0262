"""Record identifier and its textual reference format."""

import re
from dataclasses import dataclass, field
from typing import Optional

from rewrite_provenance.domain.exceptions import MalformedLocationReference

HISTORY_SEGMENT = "_history"

_TYPE_RE = re.compile(r"^[A-Z][A-Za-z]*$")
_ID_RE = re.compile(r"^[A-Za-z0-9\-.]{1,64}$")
_ABSOLUTE_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")


@dataclass(frozen=True)
class RecordId:
    """
    Identifier of a domain record: type discriminator plus id, optionally a version.
    Equality and hashing use (type, id) only.
    """

    type: str
    id: str
    version: Optional[str] = field(default=None, compare=False)

    @property
    def reference(self) -> str:
        return f"{self.type}/{self.id}"

    @property
    def versioned_reference(self) -> str:
        """`<Type>/<id>/_history/<version>` when a version is known, else the plain reference."""
        if self.version is None:
            return self.reference
        return f"{self.reference}/{HISTORY_SEGMENT}/{self.version}"

    def without_version(self) -> "RecordId":
        return RecordId(type=self.type, id=self.id)

    @classmethod
    def parse(cls, text: str) -> "RecordId":
        """
        Parse `<Type>/<id>` or `<Type>/<id>/_history/<version>`, optionally prefixed
        by an absolute server base which is discarded.
        Raises MalformedLocationReference on anything else.
        """
        if not isinstance(text, str) or not text.strip():
            raise MalformedLocationReference("location must be a non-empty string")
        raw = text.strip()
        segments = raw.split("/")
        if _ABSOLUTE_RE.match(raw):
            # scheme://host/base.../Type/id[/_history/version]
            segments = segments[3:]
            if len(segments) >= 4 and segments[-2] == HISTORY_SEGMENT:
                segments = segments[-4:]
            else:
                segments = segments[-2:]

        version = None
        if len(segments) == 4 and segments[2] == HISTORY_SEGMENT:
            version = segments[3]
            if not _ID_RE.match(version):
                raise MalformedLocationReference(f"invalid version in location: {raw!r}")
        elif len(segments) != 2:
            raise MalformedLocationReference(f"unrecognized location format: {raw!r}")

        type_, id_ = segments[0], segments[1]
        if not _TYPE_RE.match(type_):
            raise MalformedLocationReference(f"invalid record type in location: {raw!r}")
        if not _ID_RE.match(id_):
            raise MalformedLocationReference(f"invalid record id in location: {raw!r}")
        return cls(type=type_, id=id_, version=version)

    def __str__(self) -> str:
        return self.versioned_reference
