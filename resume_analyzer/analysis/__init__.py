from resume_analyzer.analysis.factory import ReportGeneratorFactory
from resume_analyzer.analysis.generator import ReportGenerator
from resume_analyzer.analysis.json_decoder import decode_ai_json

__all__ = ["ReportGenerator", "ReportGeneratorFactory", "decode_ai_json"]
