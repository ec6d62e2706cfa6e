"""Per-invocation dispatch: route lookup, handler invocation, envelopes."""
