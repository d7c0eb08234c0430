"""Canned outputs for a candidate that satisfies every rubric branch."""

from tests.candidate_output import output_lines, reference_lines


def perfect_outputs() -> dict[int, list[str]]:
    return {
        1000: reference_lines(),
        1200: output_lines(
            requested="1200", rate="7.0", monthly="36.96", total="1108.10"
        ),
    }
