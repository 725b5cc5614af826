import platform

from clipshot.clipboard.base import ClipboardReader


def get_clipboard_reader() -> ClipboardReader:
    system = platform.system()

    if system == "Darwin":
        from clipshot.clipboard.macos import MacOSClipboardReader
        return MacOSClipboardReader()
    else:
        raise NotImplementedError(f"Platform '{system}' is not supported")
