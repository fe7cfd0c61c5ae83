"""
Shared fixtures for beangraph tests.
"""

import json
from typing import Dict, List

import pytest

from beangraph.core.builder import build_graph
from beangraph.core.types import RawReport


def make_report(beans: Dict[str, List[str]], **extra_contexts) -> dict:
    """A report whose application context declares the given beans."""
    contexts = {
        "application": {
            "beans": {
                name: {"resource": f"{name}.class", "dependencies": deps}
                for name, deps in beans.items()
            },
            "parentId": None,
        }
    }
    contexts.update(extra_contexts)
    return {"contexts": contexts}


def graph_of(beans: Dict[str, List[str]]):
    return build_graph(RawReport.model_validate(make_report(beans)))


@pytest.fixture
def sample_report() -> dict:
    """
    Actuator-shaped report with a child context and an unresolved dependency.
    """
    return {
        "contexts": {
            "application": {
                "beans": {
                    "beanA": {
                        "aliases": [],
                        "scope": "singleton",
                        "type": "com.acme.BeanA",
                        "resource": "class path resource [com/acme/BeanA.class]",
                        "dependencies": ["beanB", "org.springframework.core.env.Environment"],
                    },
                    "beanB": {
                        "resource": "file [/app/BeanB.class]",
                        "dependencies": ["com.acme.Missing"],
                    },
                    "org.springframework.core.env.Environment": {
                        "dependencies": [],
                    },
                },
                "parentId": None,
            },
            "child": {
                "beans": {
                    "beanA": {"resource": "elsewhere", "dependencies": []},
                    "onlyInChild": {"resource": "child.class", "dependencies": ["beanA"]},
                },
                "parentId": "application",
            },
        }
    }


@pytest.fixture
def sample_text(sample_report) -> str:
    return json.dumps(sample_report)


@pytest.fixture
def report_file(tmp_path, sample_text):
    path = tmp_path / "beans.json"
    path.write_text(sample_text)
    return path


@pytest.fixture
def cycle_graph():
    """A -> B -> C -> A"""
    return graph_of({"A": ["B"], "B": ["C"], "C": ["A"]})


@pytest.fixture
def graph_factory():
    """Build a graph from {bean: [dependencies]}."""
    return graph_of


@pytest.fixture
def report_factory():
    """Build a report dict from {bean: [dependencies]}."""
    return make_report
