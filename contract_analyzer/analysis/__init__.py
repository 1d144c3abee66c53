from contract_analyzer.analysis.analyzer import ContractAnalyzer
from contract_analyzer.analysis.factory import AnalyzerFactory
from contract_analyzer.analysis.models import PipelineOutcome, UploadedArtifact

__all__ = ["AnalyzerFactory", "ContractAnalyzer", "PipelineOutcome", "UploadedArtifact"]
