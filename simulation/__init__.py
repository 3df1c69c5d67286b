from .traffic_light import (
    TrafficLightState,
    TrafficLightConfig,
    next_state,
    duration_for_state,
    is_red_on,
    is_amber_on,
    is_green_on,
    lamp_states,
)
