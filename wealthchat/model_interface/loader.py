import importlib, os
from .projection_model import ProjectionModel

def load_model() -> ProjectionModel:
    """
    Build the projection engine named by PROJECTION_MODEL ("package.module:factory").

    Falls back to the built-in two-phase engine when the variable is unset.
    """
    modpath = os.getenv("PROJECTION_MODEL")
    if not modpath:
        from wealthchat.model_impl.two_phase_model import TwoPhaseModel
        return TwoPhaseModel()
    mod, factory = modpath.split(":")
    return getattr(importlib.import_module(mod), factory)()
