"""Compilation builders."""

from current_affairs.generators.compilation_generator import CompilationGenerator, week_number

__all__ = ["CompilationGenerator", "week_number"]
