"""Tool declaration for the calling protocol."""

from __future__ import annotations

from typing import Any

from thoughts.types.stage import ThoughtStage

TOOL_NAME = "shannonthinking"

TOOL_DESCRIPTION = """\
A problem-solving tool inspired by Claude Shannon's systematic and iterative approach to complex problems.

This tool helps break down problems using Shannon's methodology of problem definition, \
mathematical modeling, validation, and practical implementation.

When to use this tool:
- Complex system analysis
- Information processing problems
- Engineering design challenges
- Problems requiring theoretical frameworks
- Optimization problems
- Systems requiring practical implementation
- Problems that need iterative refinement
- Cases where experimental validation complements theory

Key features:
- Systematic progression through problem definition → constraints → modeling → validation → implementation
- Support for revising earlier steps as understanding evolves
- Ability to mark steps for re-examination with new information
- Experimental validation alongside formal proofs
- Explicit tracking of assumptions and dependencies
- Confidence levels for each step

Parameters explained:
- thoughtType: Type of thinking step (problem_definition, constraints, model, proof, implementation)
- uncertainty: Uncertainty of the current thought (0-1)
- dependencies: Which previous thoughts this builds upon
- assumptions: Explicit listing of assumptions made
- isRevision: Whether this revises an earlier thought
- revisesThought: Which thought is being revised
- recheckStep: For marking steps that need re-examination
- proofElements: For formal validation steps
- experimentalElements: For empirical validation
- implementationNotes: For practical application steps

Each thought can build on, revise, or re-examine previous steps."""


def _stage_property(description: str) -> dict[str, Any]:
    return {"type": "string", "enum": ThoughtStage.choices(), "description": description}


TOOL_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "thought": {"type": "string", "description": "Your current thinking step"},
        "thoughtType": _stage_property("Type of thinking step"),
        "thoughtNumber": {
            "type": "integer",
            "description": "Current thought number",
            "minimum": 1,
        },
        "totalThoughts": {
            "type": "integer",
            "description": "Estimated total thoughts needed",
            "minimum": 1,
        },
        "uncertainty": {
            "type": "number",
            "description": "Uncertainty level (0-1)",
            "minimum": 0,
            "maximum": 1,
        },
        "dependencies": {
            "type": "array",
            "items": {"type": "integer", "minimum": 1},
            "description": "Thought numbers this builds upon",
        },
        "assumptions": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Explicit list of assumptions",
        },
        "nextThoughtNeeded": {
            "type": "boolean",
            "description": "Whether another thought step is needed",
        },
        "isRevision": {
            "type": "boolean",
            "description": "Whether this thought revises an earlier one",
        },
        "revisesThought": {
            "type": "integer",
            "description": "The thought number being revised",
            "minimum": 1,
        },
        "recheckStep": {
            "type": "object",
            "properties": {
                "stepToRecheck": _stage_property("Which type of step needs re-examination"),
                "reason": {"type": "string", "description": "Why the step needs to be rechecked"},
                "newInformation": {
                    "type": "string",
                    "description": "New information prompting the recheck",
                },
            },
            "required": ["stepToRecheck", "reason"],
            "description": "For marking steps that need re-examination",
        },
        "proofElements": {
            "type": "object",
            "properties": {
                "hypothesis": {"type": "string", "description": "The hypothesis being tested"},
                "validation": {
                    "type": "string",
                    "description": "How the hypothesis was validated",
                },
            },
            "required": ["hypothesis", "validation"],
            "description": "Elements required for formal proof steps",
        },
        "experimentalElements": {
            "type": "object",
            "properties": {
                "testDescription": {
                    "type": "string",
                    "description": "Description of the experimental test",
                },
                "results": {"type": "string", "description": "Results of the experiment"},
                "confidence": {
                    "type": "number",
                    "description": "Confidence in the experimental results (0-1)",
                    "minimum": 0,
                    "maximum": 1,
                },
                "limitations": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Limitations of the experimental validation",
                },
            },
            "required": ["testDescription", "results", "confidence", "limitations"],
            "description": "Elements for experimental validation",
        },
        "implementationNotes": {
            "type": "object",
            "properties": {
                "practicalConstraints": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "List of practical limitations and constraints",
                },
                "proposedSolution": {
                    "type": "string",
                    "description": "Detailed implementation proposal",
                },
            },
            "required": ["practicalConstraints", "proposedSolution"],
            "description": "Notes for practical implementation steps",
        },
    },
    "required": [
        "thought",
        "thoughtType",
        "thoughtNumber",
        "totalThoughts",
        "uncertainty",
        "dependencies",
        "assumptions",
        "nextThoughtNeeded",
    ],
}


def tool_declaration() -> dict[str, Any]:
    """Return the tool as a plain mapping (name, description, inputSchema)."""
    return {
        "name": TOOL_NAME,
        "description": TOOL_DESCRIPTION,
        "inputSchema": TOOL_INPUT_SCHEMA,
    }
