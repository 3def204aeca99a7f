import rx

from rxtip import Observable, TipSettings
from rxtip.streams import replay_subject

settings = TipSettings.from_env()

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Replay with RxPY")
print("-" * 100)
print()

subject = replay_subject(settings.replay_buffer_size)
subject.on_next("Initial Message 1")

# A late subscriber still sees the buffered message, then the live ones.
subject.subscribe(on_next=lambda text: print(f"The new string is {text}"))
subject.on_next("Hello")
subject.on_next("World!")

rx.just("Hello RxPY").subscribe(on_next=print)

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Replay with an rxtip Observable")
print("-" * 100)
print()

messages = Observable("messages", buffer_size=settings.replay_buffer_size)
messages.set("one")
messages.set("two")
messages.set("three")
messages.set("four")

# Only the last buffer_size values are replayed.
messages.subscribe(lambda text: print(f"Replayed or live: {text}"), call_immediately=True)
messages.set("five")
