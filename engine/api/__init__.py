"""Public engine API contracts."""

from engine.api.ai import Agent, Decision, DecisionContext
from engine.api.events import EventBus, Subscription, create_event_bus
from engine.api.flow import FlowContext, FlowProgram, FlowTransition, create_flow_program
from engine.api.gameplay import StateSnapshot, StateStore, create_state_store
from engine.api.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging

__all__ = [
    "Agent",
    "Decision",
    "DecisionContext",
    "EventBus",
    "FlowContext",
    "FlowProgram",
    "FlowTransition",
    "LoggingConfig",
    "StateSnapshot",
    "StateStore",
    "Subscription",
    "configure_logging",
    "create_event_bus",
    "create_flow_program",
    "create_state_store",
    "get_logger",
    "shutdown_logging",
]
