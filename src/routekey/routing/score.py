"""Template scoring.

A literal segment that matches is worth twice a parameter segment, so among
templates that all match a URL the one with more literal structure ranks
highest.
"""

from routekey.routing.route import PARAM, Route

LITERAL_WEIGHT = 2
PARAM_WEIGHT = 1


def score(template: Route, candidate: Route) -> int:
    """Rank how well *candidate* matches *template*. ``0`` means no match.

    - Different segment counts never match.
    - A parameter slot accepts any value (+1); a literal must be equal (+2),
      and a single mismatch ends scoring at ``0``. A position the candidate
      does not have compares as ``""``.
    - Every query key on the template must be on the candidate with the
      same normalized value. Extra candidate keys are ignored.
    """
    if len(template.segments) != len(candidate.segments):
        return 0

    rank = 0
    for position, value in template.segments.items():
        if value == PARAM:
            rank += PARAM_WEIGHT
            continue
        if candidate.segments.get(position, "") != value:
            return 0
        rank += LITERAL_WEIGHT

    for key, value in template.query_params.items():
        if candidate.query_params.get(key) != value:
            return 0

    return rank
