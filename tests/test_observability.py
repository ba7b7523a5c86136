from member_api import observability


def test_falls_back_to_local_logfire(monkeypatch):
    calls = []

    def fake_configure(**kwargs):
        calls.append(("configure", kwargs))
        if not kwargs:
            raise RuntimeError("no logfire credentials")

    monkeypatch.setattr(observability.logfire, "configure", fake_configure)
    monkeypatch.setattr(observability.logfire, "instrument_httpx", lambda: calls.append(("instrument_httpx", {})))

    observability.configure_observability()

    assert calls == [
        ("configure", {}),
        ("configure", {"send_to_logfire": False}),
        ("instrument_httpx", {}),
    ]


def test_configured_logfire_is_instrumented(monkeypatch):
    calls = []

    monkeypatch.setattr(observability.logfire, "configure", lambda **kwargs: calls.append("configure"))
    monkeypatch.setattr(observability.logfire, "instrument_httpx", lambda: calls.append("instrument_httpx"))

    observability.configure_observability()

    assert calls == ["configure", "instrument_httpx"]


def test_httpx_instrumentation_is_installed(monkeypatch):
    from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

    monkeypatch.setattr(observability.logfire, "configure", lambda **kwargs: None)
    instrumentor = HTTPXClientInstrumentor()

    try:
        observability.configure_observability()
        assert instrumentor.is_instrumented_by_opentelemetry
    finally:
        instrumentor.uninstrument()
