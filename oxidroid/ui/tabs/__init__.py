"""Renderers for the dashboard's individual screens."""