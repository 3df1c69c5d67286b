from .timer_controller import TimerController, ControllerSnapshot
