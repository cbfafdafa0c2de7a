# mentalmath

The building blocks of a mental arithmetic trainer:

- `mentalmath.difficulty`: turns a player rating into question parameters (`DifficultyParams`).
- `mentalmath.questions`: the `Operation` enum and the `Question` and `DifficultyParams` dataclasses.
- `mentalmath.states`: the application's lifecycle states and the transitions allowed between them.
- `mentalmath.userprofile`: the player's `Profile`.
- `mentalmath.repository`: loads and saves a profile as a versioned JSON file.
- `mentalmath.cli`: a command that prints difficulty parameters over a range of ratings.

## Installation

```
pip install .
```

Install the test extra with `pip install .[test]`.

## Command line

```
mentalmath
```

This prints one block for every rating from 300 to 3000 in steps of 50. Each block holds the rating, both digit counts, the four operator weights, the carry probability, the carry propagation and the complexity level, and is followed by blank lines.

Options:

- `--start N`: first rating (default 300)
- `--stop N`: last rating, included when the step lands on it (default 3000)
- `--step N`: distance between ratings (default 50). It must be positive.
- `--seed N`: seed for the complexity jitter, so that output can be repeated

## Difficulty model

```python
import random

from mentalmath.difficulty import DifficultyModel, compute_params

params = compute_params(1500, random.Random(0))
print(params.digit_count1, params.digit_count2)
print(params.operation_weights())   # {Operation.ADD: ..., Operation.SUBTRACT: ..., ...}

model = DifficultyModel(800)
params = model.compute()             # also kept as model.params
```

The model first computes `scalar = 1 - exp(-rating / 1100)`. From that value it derives:

- the digit counts, in six stages from (1, 1) up to (3, 3);
- the add, subtract, multiply and divide weights, which sum to 1;
- the carry probability;
- carry propagation, which is 1 below a scalar of 0.6 and 2 from there on;
- the complexity level, to which uniform jitter in ±0.04 is added.

A negative rating raises `ValueError`. Pass your own `random.Random` to make the jitter repeatable.

## State machine

```python
from mentalmath.states import State, StateMachine, InvalidTransitionError, state_name

machine = StateMachine()             # starts in State.STARTUP
machine.transit_to(State.PROFILE_CHECK)
print(machine.state, machine.history)
try:
    machine.transit_to(State.ACTIVE_SESSION)
except InvalidTransitionError as exc:
    print(exc, exc.current, exc.target)
```

`is_valid_transition(target)` checks a move without making it. `history` holds the states entered through transitions, oldest first. `EXIT`, `ERROR_RESOLVING` and `EXCEPTION_RESOLVING` have no outgoing transitions. `state_name` returns `"STARTUP"` or `"EXIT"` for those two states and `"NO STATE"` for every other state.

## Profile storage

```python
from mentalmath.repository import ProfileRepository, ProfileNotFoundError

repo = ProfileRepository("data/profile.json")   # default path: ../data/profile.json
if repo.exists():
    profile = repo.load()
    profile.increment_sessions()
    new_version = repo.save(profile)
```

The file is a JSON object. It holds an integer `"version"` and the profile fields under camelCase keys: `calibrated`, `baselineDifficulty`, `totalSessions`, `rating`, `bestAccuracy`, `bestSpeed`, `lastSessionAccuracy` and `lastSessionSpeed`. `Profile.to_dict` and `Profile.from_dict` convert to and from this form. `from_dict` raises `KeyError` when a key is missing.

`load` returns a `Profile` and stores the file's version in `repo.file_version`. `save` rewrites the existing file and returns the new version, which is one higher than before. It writes the JSON with an indent of 4 and sorted keys, and keeps any other keys the file already held. Both `load` and `save` raise `ProfileNotFoundError`, a subclass of `FileNotFoundError`, when the file does not exist. `save` therefore never creates a new file.

## What the package does not do

It does not generate questions, run interactive practice sessions or update ratings. `Question` is a plain data type that nothing in the package fills in. The state machine only checks and records transitions and does not drive the application. The command only prints difficulty parameters.