from fastapi import APIRouter

from .features.create_rsvp.router import router as create_rsvp_router
from .features.delete_rsvp.router import router as delete_rsvp_router
from .features.event_info.router import router as event_info_router
from .features.get_rsvp.router import router as get_rsvp_router
from .features.list_rsvps.router import router as list_rsvps_router
from .features.rsvp_summary.router import router as rsvp_summary_router
from .features.update_rsvp.router import router as update_rsvp_router

router = APIRouter()

# fixed paths first so they are not captured by /rsvp/{rsvp_id}
router.include_router(event_info_router)
router.include_router(rsvp_summary_router)
router.include_router(list_rsvps_router)
router.include_router(get_rsvp_router)
router.include_router(create_rsvp_router)
router.include_router(update_rsvp_router)
router.include_router(delete_rsvp_router)
