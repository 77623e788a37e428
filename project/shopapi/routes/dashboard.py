# shopapi/routes/dashboard.py

from fastapi import APIRouter, Depends, HTTPException, Request

from shopapi.schemas.dashboard import DashboardSummary
from shopapi.services.dashboard import read_dashboard_service
from shopapi.routes.auth import require_admin

router = APIRouter()


@router.get(
    "",
    response_model=DashboardSummary,
    summary="Сводка для главной страницы админки",
    responses={401: {"description": "Некорректный токен"}, 500: {"description": "Ошибка сборки сводки"}},
)
async def read_dashboard(request: Request, _=Depends(require_admin)):
    try:
        return await read_dashboard_service(request)
    except HTTPException:
        raise
    except Exception as e:
        await request.app.state.log.log_error("dashboard", f"Ошибка при сборке сводки: {e}")
        raise HTTPException(status_code=500, detail="Failed to build dashboard")
