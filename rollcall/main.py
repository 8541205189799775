"""Main entry point for Rollcall."""

import argparse
import getpass
import sys
from pathlib import Path

from rollcall.runtime.controller import SESSION_EXPIRED_MESSAGE, SessionController


def _login(controller: SessionController, username: str | None = None) -> bool:
    """Prompt for credentials and log in."""
    username = username or input("Username: ")
    password = getpass.getpass("Password: ")
    return controller.login(username, password)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(
        description="Rollcall - college attendance administration with idle session protection"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config/default.yaml"),
        help="Path to configuration file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--username",
        "-u",
        help="Staff username (prompted when omitted and no session is stored)",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="store_true",
        help="Show version and exit",
    )

    args = parser.parse_args()

    if args.version:
        from rollcall import __version__

        print(f"Rollcall v{__version__}")
        return 0

    controller: SessionController | None = None
    try:
        controller = SessionController(config_path=args.config)

        if not controller.restore() and not _login(controller, args.username):
            return 1

        from rollcall.ui.window import SessionWindow

        while True:
            window = SessionWindow.from_config(controller.config.get("window", {}), controller)
            window.run()
            if controller.is_authenticated:
                break  # window closed by the user

            # Logged out or expired: back to the login prompt
            notice = controller.notices.latest()
            if notice is not None and notice.message == SESSION_EXPIRED_MESSAGE:
                print(notice.message)
            print("Log in again, or press Ctrl+C to quit.")
            if not _login(controller):
                return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    except Exception as e:
        print(f"Error: {e}")
        return 1
    finally:
        if controller is not None:
            controller.shutdown()

    return 0


if __name__ == "__main__":
    sys.exit(main())
