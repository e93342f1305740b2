from fastapi import APIRouter

from ignitai.api.routes.ai_interview import router as ai_interview_router
from ignitai.api.routes.applications import router as applications_router
from ignitai.api.routes.certificates import router as certificates_router
from ignitai.api.routes.contact import router as contact_router
from ignitai.api.routes.feedback import router as feedback_router
from ignitai.api.routes.quiz import router as quiz_router
from ignitai.api.routes.real_ai_interview import router as real_ai_interview_router

api_router = APIRouter()
api_router.include_router(applications_router)
api_router.include_router(certificates_router)
api_router.include_router(contact_router)
api_router.include_router(feedback_router)
api_router.include_router(ai_interview_router)
api_router.include_router(real_ai_interview_router)
api_router.include_router(quiz_router)
