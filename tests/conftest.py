"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from appsetgen.core.models import (
    ApplicationSet,
    ApplicationSetGenerator,
    ApplicationSetSpec,
    ListGeneratorSpec,
)


def _make_appset(go_template: bool = False, generators=None) -> ApplicationSet:
    return ApplicationSet(
        metadata={"name": "guestbook"},
        spec=ApplicationSetSpec(go_template=go_template, generators=generators or []),
    )


def _list_entry(elements=None, elements_yaml: str = "") -> ApplicationSetGenerator:
    return ApplicationSetGenerator(
        list_generator=ListGeneratorSpec(elements=elements or [], elements_yaml=elements_yaml),
    )


@pytest.fixture
def make_appset():
    """Factory: ApplicationSet with the given dialect and generators."""
    return _make_appset


@pytest.fixture
def list_entry():
    """Factory: generator entry holding a List generator."""
    return _list_entry


@pytest.fixture
def legacy_appset() -> ApplicationSet:
    return _make_appset(go_template=False)


@pytest.fixture
def go_appset() -> ApplicationSet:
    return _make_appset(go_template=True)


@pytest.fixture
def appset_yml(tmp_path: Path) -> Path:
    """Write a valid appset.yml with one List generator."""
    content = textwrap.dedent("""\
        apiVersion: argoproj.io/v1alpha1
        kind: ApplicationSet
        metadata:
          name: guestbook
        spec:
          generators:
            - list:
                elements:
                  - cluster: engineering-dev
                    url: https://1.2.3.4
                  - cluster: engineering-prod
                    url: https://2.4.6.8
                    values:
                      project: prod
          template:
            metadata:
              name: '{{cluster}}-guestbook'
            spec:
              project: default
    """)
    path = tmp_path / "appset.yml"
    path.write_text(content)
    return path
