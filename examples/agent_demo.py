"""
Simulation of an AI agent using the playground as its code-running tool.

The agent (simulated here) writes small snippets. Typed snippets are checked
strictly before they run, so a wrong guess comes back as a compile error
instead of a crash halfway through.
"""

from dataclasses import dataclass

from pyplayground import Dialect, run_snippet


@dataclass
class AgentAction:
    thought: str
    source: str
    dialect: Dialect = Dialect.UNTYPED


class MockLLM:
    """Simulates an LLM working through a small task."""

    def __init__(self):
        self.step = 0

    def next_action(self) -> AgentAction | None:
        actions = [
            AgentAction(
                thought="Let me check some arithmetic first.",
                source="sum(range(10))",
            ),
            AgentAction(
                thought="I'll write a typed helper.",
                source=(
                    "def mean(values: list[float]) -> float:\n"
                    "    return sum(values) / len(values)\n"
                    "\n"
                    "console.log('mean:', mean([1.0, 2.0, 4.0]))\n"
                ),
                dialect=Dialect.TYPED,
            ),
            # Type mistake, caught before anything runs
            AgentAction(
                thought="Now pass it a string.",
                source=(
                    "def mean(values: list[float]) -> float:\n"
                    "    return sum(values) / len(values)\n"
                    "\n"
                    "mean('1, 2, 4')\n"
                ),
                dialect=Dialect.TYPED,
            ),
            # Runtime failure
            AgentAction(
                thought="What about an empty list?",
                source="values = []\nsum(values) / len(values)",
            ),
        ]

        if self.step < len(actions):
            action = actions[self.step]
            self.step += 1
            return action
        return None


def main():
    print("🤖 Agent initializing...")
    llm = MockLLM()

    while True:
        action = llm.next_action()
        if not action:
            print("✅ Agent finished task.")
            break

        print(f"🤖 Thought: {action.thought} ({action.dialect.label})")
        report = run_snippet(action.source, action.dialect)
        for line in (report.transcript() or "(no output)").splitlines():
            print(f"  -> {line}")
        print("-" * 50)


if __name__ == "__main__":
    main()
