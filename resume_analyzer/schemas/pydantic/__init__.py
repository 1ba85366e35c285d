from .analysis import AnalyzeResponse, ErrorResponse, HealthResponse, KeywordAnalysis

__all__ = ["AnalyzeResponse", "ErrorResponse", "HealthResponse", "KeywordAnalysis"]
