from src.app import AppSettings, run_status

__all__ = ["main"]


def main() -> None:
    """Entry point for the application."""
    settings = AppSettings.from_env()
    run_status(settings)


if __name__ == "__main__":
    main()
