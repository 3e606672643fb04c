import pyperclip
import pytest
from passgen import ClipboardError, SystemClipboard, copy_password


@pytest.mark.asyncio
async def test_system_clipboard_delegates_to_pyperclip(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    await copy_password(SystemClipboard(), "Secret1!")

    assert copied == ["Secret1!"]


@pytest.mark.asyncio
async def test_platform_failure_becomes_clipboard_error(monkeypatch):
    def deny(text):
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(pyperclip, "copy", deny)

    with pytest.raises(ClipboardError, match="no clipboard mechanism"):
        await copy_password(SystemClipboard(), "Secret1!")


@pytest.mark.asyncio
async def test_empty_password_never_reaches_clipboard(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    with pytest.raises(ClipboardError):
        await copy_password(SystemClipboard(), "")

    assert copied == []


@pytest.mark.asyncio
async def test_platform_reason_with_braces_is_kept_verbatim(monkeypatch):
    def deny(text):
        raise pyperclip.PyperclipException("missing {xclip} and {wl-copy}")

    monkeypatch.setattr(pyperclip, "copy", deny)

    with pytest.raises(ClipboardError) as excinfo:
        await copy_password(SystemClipboard(), "Secret1!")

    assert excinfo.value.ctx == {"reason": "missing {xclip} and {wl-copy}"}
    assert str(excinfo.value) == (
        "Failed to copy password: missing {xclip} and {wl-copy}"
    )
