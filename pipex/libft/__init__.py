"""Helpers for characters, conversions, buffers, strings, lists, output, line reading and printf."""