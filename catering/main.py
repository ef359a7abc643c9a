"""Entry point for the catering configurator Textual app."""

from __future__ import annotations

from catering.configurator_app import CateringConfiguratorApp


def main() -> None:
    """Run the Textual application."""
    CateringConfiguratorApp().run()


if __name__ == "__main__":
    main()
