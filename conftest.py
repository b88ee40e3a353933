"""
Shared fixtures for the domchain tests.
"""

import pytest

from domchain import Page


class RecordingNode:
    """Element sink that records every call made on the whole tree."""

    def __init__(self, tag_spec=None, log=None):
        self.tag_spec = tag_spec
        self.log = log if log is not None else []
        self.children = []
        self.attributes = {}
        self.payload = None
        self.key = None

    def insert(self, tag_spec):
        self.log.append(("insert", tag_spec))
        child = RecordingNode(tag_spec, self.log)
        self.children.append(child)
        return child

    def set(self, mapping):
        self.log.append(("set", dict(mapping)))
        self.attributes.update(mapping)
        return self

    def html(self, text):
        self.log.append(("html", text))
        self.payload = text
        return self

    def id(self, key):
        self.log.append(("id", key))
        self.key = key
        return self

    def __repr__(self):
        return f"<RecordingNode {self.tag_spec}>"


@pytest.fixture
def sink():
    return RecordingNode("root")


@pytest.fixture
def page():
    return Page()

