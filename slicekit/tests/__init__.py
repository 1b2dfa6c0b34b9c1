"""
Test suite for slicekit.

Focus areas:
- Type derivation and creator/reducer agreement
- Action definition normalization and defaults
- Reducer totality and purity
- Root-aware selectors
- Replay, action log and CLI
"""
