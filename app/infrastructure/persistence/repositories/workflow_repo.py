"""Workflow definition repository (templates, stages, requirements) and cache reads."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.workflow import (
    DocumentRequirementRow,
    StageProgressCacheRow,
    WorkflowProgressCacheRow,
    WorkflowStageRow,
    WorkflowTemplateRow,
)
from app.infrastructure.persistence.models.progress import (
    ApplicationWorkflowProgress,
    StageProgress,
)
from app.infrastructure.persistence.models.workflow import (
    DocumentRequirement,
    WorkflowStage,
    WorkflowTemplate,
)


class WorkflowRepository:
    """Implements IWorkflowRepository. Read-only."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_active_template(self, program_id: str) -> WorkflowTemplateRow | None:
        result = await self.db.execute(
            select(WorkflowTemplate)
            .where(
                WorkflowTemplate.program_id == program_id,
                WorkflowTemplate.is_active.is_(True),
            )
            .order_by(WorkflowTemplate.version.desc())
            .limit(1)
        )
        t = result.scalar_one_or_none()
        if t is None:
            return None
        return WorkflowTemplateRow(
            id=t.id,
            program_id=t.program_id,
            template_name=t.template_name,
            description=t.description,
            total_stages=t.total_stages,
            estimated_time_months=t.estimated_time_months,
            version=t.version,
        )

    async def list_stages(self, template_id: str) -> list[WorkflowStageRow]:
        result = await self.db.execute(
            select(WorkflowStage)
            .where(WorkflowStage.template_id == template_id)
            .order_by(WorkflowStage.stage_order)
        )
        return [
            WorkflowStageRow(
                id=s.id,
                template_id=s.template_id,
                stage_order=s.stage_order,
                stage_name=s.stage_name,
                description=s.description,
                estimated_days=s.estimated_days,
                is_required=s.is_required,
                can_skip=s.can_skip,
                auto_progress=s.auto_progress,
            )
            for s in result.scalars().all()
        ]

    async def list_requirements(self, stage_ids: list[str]) -> list[DocumentRequirementRow]:
        if not stage_ids:
            return []
        result = await self.db.execute(
            select(DocumentRequirement).where(DocumentRequirement.stage_id.in_(stage_ids))
        )
        return [
            DocumentRequirementRow(
                id=r.id,
                stage_id=r.stage_id,
                document_name=r.document_name,
                is_required=r.is_required,
            )
            for r in result.scalars().all()
        ]

    async def list_stage_progress_cache(
        self, application_id: str
    ) -> list[StageProgressCacheRow]:
        result = await self.db.execute(
            select(StageProgress).where(StageProgress.application_id == application_id)
        )
        return [
            StageProgressCacheRow(
                stage_id=p.stage_id, started_at=p.started_at, completed_at=p.completed_at
            )
            for p in result.scalars().all()
        ]

    async def get_workflow_progress_cache(
        self, application_id: str, template_id: str
    ) -> WorkflowProgressCacheRow | None:
        result = await self.db.execute(
            select(ApplicationWorkflowProgress).where(
                ApplicationWorkflowProgress.application_id == application_id,
                ApplicationWorkflowProgress.template_id == template_id,
            )
        )
        p = result.scalar_one_or_none()
        if p is None:
            return None
        return WorkflowProgressCacheRow(
            status=p.status, started_at=p.started_at, completed_at=p.completed_at
        )
