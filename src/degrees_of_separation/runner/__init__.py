from degrees_of_separation.runner.analyze import analyze, analyze_adjacency, main_analyze

__all__ = ["analyze", "analyze_adjacency", "main_analyze"]
