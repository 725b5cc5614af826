from clipshot.capture.runner import AsyncCommandRunner, CommandResult, CommandRunner
from clipshot.capture.screenshot import capture_screenshot

__all__ = [
    'AsyncCommandRunner',
    'CommandResult',
    'CommandRunner',
    'capture_screenshot',
]
