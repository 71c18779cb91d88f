from giftdraw.services.constraints import Assignment, DrawFailure, Exclusion
from giftdraw.services.draw import DrawResult, run_draw
from giftdraw.services.draw_flow import DrawError

__all__ = ["Assignment", "DrawFailure", "Exclusion", "DrawResult", "run_draw", "DrawError"]
