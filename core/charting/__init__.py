"""Declarative chart rendering for the gallery.

Charts are pure render passes producing draw commands (`marks`), serialized to
Chart.js payloads (`render`). This package contains the chart catalog, the
chart widgets, and the preview cache used by the views.
"""
