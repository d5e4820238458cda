"""Showcase — демонстрация BigInt и Rational на эталонном сценарии."""

from .showcase import ShowcaseConfig, main, run_showcase

__all__ = ["ShowcaseConfig", "run_showcase", "main"]
