from solid_playground.events.event_bus_module import EventBusModule

__all__ = ["EventBusModule"]
