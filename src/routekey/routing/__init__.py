"""Routing — URL decomposition, template scoring and the route table.

Templates are registered once and scored against each incoming URL that
shares their segment count.
"""
