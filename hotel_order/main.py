"""Entry point for the hotel-order Textual app."""

from __future__ import annotations

from hotel_order.ordering_app import HotelOrderingApp


def main() -> None:
    """Run the Textual application."""
    HotelOrderingApp().run()


if __name__ == "__main__":
    main()
