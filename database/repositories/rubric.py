import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import VettingPillar, VettingCriterion
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class RubricRepository(BaseRepository):
    """Pillar and criterion definitions. Rows are configuration, written only by seeding."""

    def get_pillars(self) -> List[VettingPillar]:
        stmt = (
            select(VettingPillar)
            .options(selectinload(VettingPillar.criteria))
            .order_by(VettingPillar.position, VettingPillar.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_criterion(self, criterion_id: str) -> Optional[VettingCriterion]:
        stmt = select(VettingCriterion).where(VettingCriterion.id == criterion_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def load_definition(self) -> Dict[str, Any]:
        """Read the stored rubric back in the same shape as the YAML definition."""
        return {
            'pillars': [
                {
                    'id': pillar.id,
                    'name': pillar.name,
                    'description': pillar.description or '',
                    'weight': float(pillar.pillar_weight),
                    'criteria': [
                        {
                            'id': criterion.id,
                            'question': criterion.question,
                            'weight': float(criterion.weight),
                            'critical': bool(criterion.is_critical),
                            'guidance': dict(criterion.guidance or {}),
                        }
                        for criterion in pillar.criteria
                    ],
                }
                for pillar in self.get_pillars()
            ]
        }

    def seed(self, definition: Dict[str, Any]) -> int:
        """
        Insert or update pillars and criteria from a rubric definition.

        Returns:
            Number of criteria written
        """
        written = 0
        for p_pos, pillar_data in enumerate(definition.get('pillars', [])):
            self.db.merge(VettingPillar(
                id=pillar_data['id'],
                name=pillar_data['name'],
                description=pillar_data.get('description', ''),
                pillar_weight=pillar_data['weight'],
                position=p_pos,
            ))
            for c_pos, criterion_data in enumerate(pillar_data.get('criteria', [])):
                self.db.merge(VettingCriterion(
                    id=criterion_data['id'],
                    pillar_id=pillar_data['id'],
                    question=criterion_data['question'],
                    weight=criterion_data['weight'],
                    is_critical=bool(criterion_data.get('critical', False)),
                    guidance={str(k): v for k, v in (criterion_data.get('guidance') or {}).items()},
                    position=c_pos,
                ))
                written += 1
        self.flush()
        logger.info(f"Seeded rubric: {len(definition.get('pillars', []))} pillars, {written} criteria")
        return written
