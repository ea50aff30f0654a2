"""Display colors attached to tiers and breakdown lines."""

GREEN = "#22c55e"
CYAN = "#06B6D4"
AMBER = "#F59E0B"
RED = "#ff4757"
