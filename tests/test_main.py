"""Tests for the demo entry point."""

from io import StringIO

from gateway import main as demo
from gateway.servers.forwarding import ForwardingServer

EXPECTED = [
    (200, "Ok"),
    (200, "Ok"),
    (403, "Not Allowed"),
    (201, "User Created"),
    (404, "Not Ok"),
]


def test_run_demo_prints_status_body_tuples(server: ForwardingServer):
    stream = StringIO()

    assert demo.run_demo(server, stream) == EXPECTED

    assert stream.getvalue().splitlines() == [
        "(200, 'Ok')",
        "(200, 'Ok')",
        "(403, 'Not Allowed')",
        "(201, 'User Created')",
        "(404, 'Not Ok')",
    ]


def test_main_prints_demo_to_stdout(capsys, monkeypatch):
    monkeypatch.setattr(demo, "configure_logging", lambda *_: None)

    demo.main()

    out = capsys.readouterr().out.splitlines()
    assert len(out) == 5
    assert out[2] == "(403, 'Not Allowed')"
