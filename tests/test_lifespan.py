from unittest.mock import MagicMock

from studyguide.mcp.lifespan import ServerState, lifespan


class TestServerState:
    def test_ensure_cached(self):
        state = ServerState()
        construct = MagicMock(return_value=object())

        obj1 = state.ensure_cached("KEY", construct)
        obj2 = state.ensure_cached("KEY", construct)

        assert obj1 is obj2
        construct.assert_called_once_with()

    def test_separate_keys(self):
        state = ServerState()
        assert state.ensure_cached("A", lambda: "a") == "a"
        assert state.ensure_cached("B", lambda: "b") == "b"


class TestLifespan:
    async def test_state(self):
        async with lifespan(MagicMock()) as state:
            assert state == ServerState()

    async def test_logs_missing_content_dir(self, monkeypatch, default_settings):
        logger = MagicMock()
        monkeypatch.setattr("studyguide.mcp.lifespan.get_logger", lambda name: logger)

        async with lifespan(MagicMock()):
            pass

        logger.warning.assert_called_once_with(
            f"Content directory not found: {default_settings.content_dir}"
        )
