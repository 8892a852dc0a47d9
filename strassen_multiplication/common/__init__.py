"""Shared configuration, logging, timing, metrics and dataset helpers."""
