#!/usr/bin/env python3
"""
Color Ambience
Entry point: samples a screen or window region and prints its colors
"""

import logging
import sys

from capture.region import RegionResolver
from capture.screen_grabber import MssScreenGrabber, ScreenBounds
from config.settings import ConfigManager, setup_logging
from detection.color_detector import ColorDetector
from runner.capture_loop import CaptureLoop
from runner.console import print_color_set

__version__ = "1.0.0"


def build_loop(config_manager: ConfigManager) -> CaptureLoop:
    """Wire the capture pipeline from configuration"""
    settings = config_manager.capture_settings()

    window_handle = None
    window_bounds = None
    if sys.platform == 'win32':
        from capture.window_capture import WindowCapture

        windows = WindowCapture()
        window_handle = windows.locate(settings.capture_name)
        window_bounds = windows.window_bounds
    elif settings.capture_name:
        logging.warning(f"Window lookup is only supported on Windows, "
                        f"capturing the desktop instead of \"{settings.capture_name}\"")

    screen_bounds = ScreenBounds()
    resolver = RegionResolver(
        screen_bounds,
        window_bounds=window_bounds,
        crop_percentage=settings.capture_percentage,
        use_virtual_screen=settings.use_virtual_screen
    )

    return CaptureLoop(
        resolver=resolver,
        grabber=MssScreenGrabber(screen_bounds.sct),
        detector=ColorDetector(settings),
        settings=settings,
        sink=print_color_set,
        window_handle=window_handle
    )


def main():
    """Main application entry point"""
    loop = None
    try:
        config_manager = ConfigManager()
        log_config = config_manager.get('logging')
        setup_logging(
            level=log_config.get('level', 'INFO'),
            log_filter=log_config.get('log_filter', []),
            file_enabled=log_config.get('file_enabled', True)
        )
        logging.info(f"Color Ambience v{__version__}")

        if config_manager.needs_setup:
            config_manager.interactive_setup()

        errors = config_manager.validate_config()
        for error in errors:
            logging.warning(f"Config: {error}")

        loop = build_loop(config_manager)
        loop.run()

    except KeyboardInterrupt:
        if loop is not None:
            loop.stop()
        logging.info("Interrupted, exiting")
    except Exception as e:
        logging.error(f"Application failed: {e}")
        print(f"Error: {e}")
        sys.exit(1)
    finally:
        if loop is not None:
            loop.grabber.close()


if __name__ == "__main__":
    main()
