from chss.infra.python_chess_rules_engine import PythonChessRulesEngine

__all__ = ["PythonChessRulesEngine"]
