"""Travel guide backend: places, reviews and live notifications.

Kept as a regular package so ``app`` never resolves to an unrelated
namespace package from site-packages.
"""
