"""Shared helpers for the invoice tracker."""
