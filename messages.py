# messages.py

# Defines the events the presentation layer feeds into the game engine

# 1. Event types
# 2. Helper to build event dicts

# Event types:
EVT_START = "start"                 # player pressed start (no payload)
EVT_SUBMIT = "submit"               # player submitted a word (text)
EVT_TICK = "tick"                   # one second of the session elapsed (no payload)

EVENT_TYPES = (EVT_START, EVT_SUBMIT, EVT_TICK)


def make_event(event_type, **kwargs):
    return {"type": event_type, **kwargs}


def start_event():
    return make_event(EVT_START)


def submit_event(text):
    return make_event(EVT_SUBMIT, text=text)


def tick_event():
    return make_event(EVT_TICK)
