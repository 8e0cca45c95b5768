from chss.ports.rules_engine import AppliedMove, RulesEngine

__all__ = ["AppliedMove", "RulesEngine"]
