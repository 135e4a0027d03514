import subprocess
import sys

import pytest

from minitools.adapters import url_opener
from minitools.adapters.url_opener import SystemUrlOpener
from minitools.domain.errors import UrlOpenError


class _PopenRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append((args, kwargs))
        return object()


def test_empty_url_is_rejected():
    with pytest.raises(UrlOpenError):
        SystemUrlOpener().open("   ")


def test_linux_uses_xdg_open_detached(monkeypatch):
    popen = _PopenRecorder()
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(url_opener.shutil, "which", lambda name: "/usr/bin/xdg-open")
    monkeypatch.setattr(url_opener.subprocess, "Popen", popen)

    SystemUrlOpener().open(" https://example.org ")

    args, kwargs = popen.calls[0]
    assert args == ["/usr/bin/xdg-open", "https://example.org"]
    assert kwargs["start_new_session"] is True
    assert kwargs["stdout"] is subprocess.DEVNULL


def test_launcher_oserror_becomes_url_open_error(monkeypatch):
    def _boom(*args, **kwargs):
        raise FileNotFoundError("xdg-open")

    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(url_opener.shutil, "which", lambda name: "/usr/bin/xdg-open")
    monkeypatch.setattr(url_opener.subprocess, "Popen", _boom)

    with pytest.raises(UrlOpenError) as exc_info:
        SystemUrlOpener().open("https://example.org")

    assert exc_info.value.url == "https://example.org"


def test_falls_back_to_webbrowser_without_xdg_open(monkeypatch):
    opened = []
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(url_opener.shutil, "which", lambda name: None)
    monkeypatch.setattr(url_opener.webbrowser, "open", lambda url: opened.append(url) or False)

    with pytest.raises(UrlOpenError):
        SystemUrlOpener().open("https://example.org")

    assert opened == ["https://example.org"]
