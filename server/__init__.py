"""HTTP service exposing agentgraph validation, analysis and translation."""
