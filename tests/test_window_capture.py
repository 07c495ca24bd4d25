"""Tests for win32 window lookup (Windows only)."""

from __future__ import annotations

import pytest
import pytest_mock

pytest.importorskip("win32gui")

from capture.region import Rectangle  # noqa: E402
from capture.window_capture import WindowCapture  # noqa: E402

WINDOWS = {101: "Program Manager", 102: "Notes - Video Player", 103: "Video Player", 104: ""}


@pytest.fixture
def fake_win32(mocker: pytest_mock.MockerFixture):
    win32gui = mocker.patch("capture.window_capture.win32gui")
    win32gui.EnumWindows.side_effect = lambda callback, extra: [callback(h, extra) for h in WINDOWS]
    win32gui.IsWindowVisible.return_value = True
    win32gui.GetWindowText.side_effect = WINDOWS.get
    return win32gui


def test_list_windows_skips_untitled(fake_win32) -> None:
    titles = [w.title for w in WindowCapture().list_windows()]

    assert titles == ["Program Manager", "Notes - Video Player", "Video Player"]


def test_locate_prefers_prefix(fake_win32) -> None:
    assert WindowCapture().locate("video") == 103


def test_locate_unmatched_is_desktop(fake_win32) -> None:
    assert WindowCapture().locate("blender") is None
    assert WindowCapture().locate("") is None


def test_window_bounds(fake_win32) -> None:
    fake_win32.GetWindowRect.return_value = (10, 20, 210, 170)

    assert WindowCapture().window_bounds(103) == Rectangle(10, 20, 200, 150)


def test_window_bounds_of_closed_window(fake_win32) -> None:
    import pywintypes

    fake_win32.GetWindowRect.side_effect = pywintypes.error(1400, "GetWindowRect", "Invalid window handle.")

    assert WindowCapture().window_bounds(999) is None
