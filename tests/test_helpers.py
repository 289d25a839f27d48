"""Tests for the Template helper."""

from viewkeys import TemplateRegistry, ViewStore, autorun, template_helper


def _setup():
    store = ViewStore()
    registry = TemplateRegistry()
    registry.register("panes/unrated", lambda data: f"unrated:{data.get('count', 0)}")
    registry.register("panes/rated", lambda data: "rated")
    return store, registry, template_helper(store, registry)


class TestTemplateHelper:
    def test_renders_stored_name(self):
        store, _, helper = _setup()
        store.set("mainPane1", "panes/rated")
        assert helper("mainPane1") == "rated"

    def test_renders_stored_record(self):
        store, _, helper = _setup()
        store.set("mainPane1", {"template": "panes/unrated", "data": {"count": 3}})
        assert helper("mainPane1") == "unrated:3"

    def test_absent_key(self):
        _, _, helper = _setup()
        assert helper("mainPane2") == ""

    def test_inactive_key(self):
        store, _, helper = _setup()
        store.set("mainPane2", False)
        assert helper("mainPane2") == ""

    def test_unregistered_template(self):
        store, _, helper = _setup()
        store.set("mainPane1", "panes/missing")
        assert helper("mainPane1") == ""

    def test_subscribes_to_key(self):
        store, _, helper = _setup()
        rendered = []
        autorun(lambda c: rendered.append(helper("mainPane1")))
        store.set("mainPane1", "panes/rated")
        store.set("mainPane1", {"template": "panes/unrated", "data": {"count": 1}})
        assert rendered == ["", "rated", "unrated:1"]

    def test_secondary_cleared_by_primary(self):
        store, _, helper = _setup()
        store.set("mainPane2", "panes/rated")
        rendered = []
        autorun(lambda c: rendered.append(helper("mainPane2")))
        store.set("mainPane1", "panes/unrated")
        assert rendered == ["rated", ""]
