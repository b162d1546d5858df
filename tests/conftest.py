"""Shared test fixtures for structval."""

from __future__ import annotations

import pytest

from structval import schema as s
from structval.loader import DocumentLoader
from structval.models.schema import ObjectSchema
from structval.validator import SchemaValidator


@pytest.fixture
def validator() -> SchemaValidator:
    return SchemaValidator(max_depth=64)


@pytest.fixture
def loader() -> DocumentLoader:
    return DocumentLoader()


@pytest.fixture
def team_schema() -> ObjectSchema:
    """A team with members, exercising every descriptor variant."""
    return s.object(
        {
            "name": s.string(min=1, max=40),
            "slug": s.string(pattern=r"^[a-z0-9-]+$"),
            "active": s.boolean(),
            "members": s.array(
                s.object(
                    {
                        "name": s.string(min=1),
                        "age": s.number(min=0, max=150, integer=True),
                        "role": s.value(["owner", "member"]),
                        "email": s.string(pattern=r"@", nullable=True, required=False),
                    }
                ),
                min=1,
            ),
        }
    )


VALID_TEAM = {
    "name": "Platform",
    "slug": "platform",
    "active": True,
    "members": [
        {"name": "Ada", "age": 36, "role": "owner", "email": "ada@example.com"},
        {"name": "Linus", "age": 28, "role": "member", "email": None},
        {"name": "Grace", "age": 45, "role": "member"},
    ],
}


SAMPLE_TEAM_YAML = """\
name: Platform
slug: platform
active: true
members:
  - name: Ada
    age: 36
    role: owner
  - name: ""
    age: 12.5
    role: admin
"""
