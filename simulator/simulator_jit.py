from numba import njit

# Status codes returned by simulate_tape
HALTED = 0
UNDEFINED = 1
OUT_OF_BOUNDS = 2
STEP_BUDGET = 3


@njit
def simulate_tape(delta, final_mask, tape, head, max_steps):
    """
    Compiled machine loop over a dense transition array.

    delta[state, symbol] holds (next_state, write, move) with next_state == -1
    for undefined entries. The tape is modified in place. A negative
    max_steps disables the budget.
    Returns (status, state, head, steps).
    """
    state = 0
    steps = 0

    while not final_mask[state]:
        if max_steps >= 0 and steps >= max_steps:
            return STEP_BUDGET, state, head, steps

        if head < 0 or head >= tape.shape[0]:
            return OUT_OF_BOUNDS, state, head, steps

        symbol = tape[head]
        next_state = delta[state, symbol, 0]
        if next_state < 0:
            return UNDEFINED, state, head, steps

        # Write symbol
        tape[head] = delta[state, symbol, 1]

        # Move head
        head += delta[state, symbol, 2]

        # Update state
        state = next_state
        steps += 1

        if head < 0 or head >= tape.shape[0]:
            return OUT_OF_BOUNDS, state, head, steps

    return HALTED, state, head, steps
