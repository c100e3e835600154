"""Request and response schemas for the WidgetPilot API."""
