"""
WidgetPilot HTTP API

Run with: uvicorn widgetpilot.api.main:app
"""
