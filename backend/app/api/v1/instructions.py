from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.database import get_db
from app.schemas.optimization import InstructionSetResponse
from app.services.optimization_service import build_instructions

router = APIRouter()


@router.get(
    "/",
    response_model=InstructionSetResponse,
    summary="Dispatch instructions",
    description="Immediate instructions for the current simulation hour plus "
    "scheduled instructions for the forecast window that follows it.",
)
async def get_instructions(db: AsyncSession = Depends(get_db)):
    instructions = await build_instructions(db)
    return InstructionSetResponse.model_validate(instructions.to_dict())
