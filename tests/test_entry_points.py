import pytest

import core.config
import main
import stdio_server


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("VAPI_API_KEY", raising=False)
    monkeypatch.setattr(core.config, "load_dotenv", lambda *args, **kwargs: False)


def test_push_server_exits_before_listening_without_api_key(no_api_key, monkeypatch) -> None:
    started = []
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: started.append(args))

    with pytest.raises(SystemExit) as exc_info:
        main.main()

    assert exc_info.value.code == 1
    assert started == []


def test_stdio_server_exits_before_serving_without_api_key(no_api_key, monkeypatch) -> None:
    built = []
    monkeypatch.setattr(stdio_server, "build_server", lambda config: built.append(config))

    with pytest.raises(SystemExit) as exc_info:
        stdio_server.main()

    assert exc_info.value.code == 1
    assert built == []
