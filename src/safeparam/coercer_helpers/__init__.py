"""Per-target conversion helpers used by :mod:`safeparam.coercer`.

Each ``*_conversion`` module exposes one ``convert_*`` function taking a
normalized, non-missing value and the call's ``CoercionOptions``. Failures are
signalled by raising ``CoercionError``; the coercer owns the fallback.
"""
