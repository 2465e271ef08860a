"""
Feedback scoring for a single (guess, answer) pair.

Produces the pattern a real game would show, as a Word whose states are
CORRECT / MISPLACED / ABSENT. Useful for turning "I guessed X and the answer
was Y" into a pattern, and as an oracle in tests: any answer always matches
the pattern it produces.

Algorithm (two-pass, duplicate-safe):
  1) Mark CORRECT slots and count the answer's unmatched letters.
  2) Mark MISPLACED while an unmatched copy remains, consuming it;
     everything else is ABSENT.

Examples (G = correct, Y = misplaced, - = absent):
  score("belle", "level") -> -GYYY
  score("happy", "paper") -> -GGY-
"""

from collections import Counter
from typing import Union

from .word import LetterState, Word


def score(guess: Union[Word, str], answer: Union[Word, str]) -> Word:
    guess_w = Word(guess) if isinstance(guess, str) else guess.copy()
    answer_text = answer.to_text() if isinstance(answer, Word) else Word(answer).to_text()
    guess_text = guess_w.to_text()

    # Pass 1: greens, and leftover counts from the answer
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess_text, answer_text)):
        if g == a:
            guess_w.set_state(i, LetterState.CORRECT)
        else:
            remaining[a] += 1

    # Pass 2: yellows capped by remaining multiplicity
    for i, g in enumerate(guess_text):
        if guess_w.letter_at(i).state is LetterState.CORRECT:
            continue
        if remaining[g] > 0:
            guess_w.set_state(i, LetterState.MISPLACED)
            remaining[g] -= 1
        else:
            guess_w.set_state(i, LetterState.ABSENT)

    return guess_w
