"""Engine runtime modules."""

from engine.api.events import Subscription
from engine.api.flow import FlowContext, FlowTransition
from engine.runtime.events import TypedEventBus
from engine.runtime.flow import RuntimeFlowProgram
from engine.runtime.logging import JsonFormatter, configure_engine_logging
from engine.runtime.scheduler import Scheduler

__all__ = [
    "FlowContext",
    "FlowTransition",
    "JsonFormatter",
    "RuntimeFlowProgram",
    "Scheduler",
    "Subscription",
    "TypedEventBus",
    "configure_engine_logging",
]
