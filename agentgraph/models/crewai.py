"""CrewAI crew document (role/task format)."""

from typing import Any, Literal

from pydantic import Field

from agentgraph.models.base import CamelModel

CrewProcess = Literal["sequential", "hierarchical", "consensual"]


class CrewLLM(CamelModel):
    model: str  # "provider/model", LiteLLM style
    temperature: float | None = None
    max_tokens: int | None = None
    top_p: float | None = None


class CrewAgent(CamelModel):
    """a role-oriented crew member."""

    role: str
    goal: str
    backstory: str
    # set when the node only references an externally defined agent
    agent_id: str | None = None
    tools: list[str] | None = None
    llm: CrewLLM | None = None
    verbose: bool = False
    allow_delegation: bool = True
    max_iter: int = 15
    max_rpm: int | None = None
    memory: bool = True
    cache: bool = True
    system_template: str | None = None
    prompt_template: str | None = None
    response_template: str | None = None


class CrewTask(CamelModel):
    """the task paired with one crew agent."""

    id: str | None = None
    description: str
    expected_output: str
    agent: str | None = None  # role of the assigned agent
    tools: list[str] | None = None
    context: list[str] | None = None  # ids of tasks whose output feeds this one
    async_execution: bool | None = Field(default=None, alias="async")
    config: dict[str, Any] | None = None


class Crew(CamelModel):
    """a complete crew."""

    name: str
    agents: list[CrewAgent] = Field(default_factory=list)
    tasks: list[CrewTask] = Field(default_factory=list)
    process: CrewProcess = "sequential"
    verbose: bool = False
    memory: bool = True
    cache: bool = True
    max_rpm: int | None = None
    share_crew_ai: bool = Field(default=False, alias="shareCrewAI")
