"""Report response schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ReportModel(BaseModel):
    """Reports are read-only and serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PipelineStage(ReportModel):
    sales_stage: str | None
    count: int
    total_value: float
    avg_probability: float | None = None


class SalesPipelineReport(ReportModel):
    """Leads per sales stage, in pipeline order."""

    stages: list[PipelineStage]
    total_count: int
    total_value: float
    assigned_sales_rep: str | None = None
