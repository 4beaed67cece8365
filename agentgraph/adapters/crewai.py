"""CrewAI adapter.

Each agent node becomes one crew member plus exactly one task. Task context
links only to predecessor nodes that are themselves agents; trigger,
condition, loop and end nodes produce nothing in the crew.
"""

import logging

from agentgraph.analysis.graph_analysis import in_degrees, out_degrees, predecessors
from agentgraph.models.agent_config import AgentConfig
from agentgraph.models.base import CamelModel
from agentgraph.models.crewai import Crew, CrewAgent, CrewLLM, CrewProcess, CrewTask
from agentgraph.models.workflow import WorkflowConfig, WorkflowNode

logger = logging.getLogger(__name__)

# LiteLLM-style provider names
PROVIDER_NAMES: dict[str, str] = {
    "openai": "openai",
    "anthropic": "anthropic",
    "google": "google",
    "mistral": "mistral",
    "cohere": "cohere",
    "azure-openai": "azure",
    "bedrock": "bedrock",
    "custom": "custom",
}

DEFAULT_MAX_ITER = 15


class CrewAIAdapterOptions(CamelModel):
    """options for the CrewAI adapter."""

    # None infers sequential for a strict chain, hierarchical otherwise
    process: CrewProcess | None = None
    verbose: bool = False
    enable_memory: bool = True
    enable_cache: bool = True
    max_rpm: int = 10


def map_crew_model(provider: str, model: str) -> str:
    return f"{PROVIDER_NAMES.get(provider, provider)}/{model}"


def _goal(role: str, system_prompt: str | None, description: str | None) -> str:
    return system_prompt or description or f"Execute tasks as {role}"


def _backstory(role: str, system_prompt: str | None, description: str | None) -> str:
    if description:
        return f"{description}. {system_prompt or ''}"
    return system_prompt or f"An AI agent specialized in performing tasks related to {role}."


def _expected_output(role: str) -> str:
    return f"Results from {role}"


def map_agent_to_crew_agent(
    agent: AgentConfig,
    options: CrewAIAdapterOptions | None = None,
) -> CrewAgent:
    """Map an agent descriptor to a CrewAI agent."""
    options = options or CrewAIAdapterOptions()
    role = agent.name or agent.id
    params = agent.parameters

    llm = CrewLLM(
        model=map_crew_model(agent.provider, agent.model),
        temperature=params.temperature if params and params.temperature is not None else 0.7,
        max_tokens=params.max_tokens if params and params.max_tokens is not None else 1000,
        top_p=params.top_p if params and params.top_p is not None else 1.0,
    )

    memory_enabled = options.enable_memory and (
        agent.memory is None or agent.memory.type != "none"
    )

    return CrewAgent(
        role=role,
        goal=_goal(role, agent.system_prompt, agent.description),
        backstory=_backstory(role, agent.system_prompt, agent.description),
        tools=[tool.name for tool in agent.tools] if agent.tools is not None else None,
        llm=llm,
        verbose=options.verbose,
        allow_delegation=True,
        max_iter=DEFAULT_MAX_ITER,
        memory=memory_enabled,
        cache=options.enable_cache,
    )


def _late_bound_crew_agent(node: WorkflowNode, options: CrewAIAdapterOptions) -> CrewAgent:
    # only the reference is known; the crew runtime resolves model and tools
    role = node.agent_id
    return CrewAgent(
        role=role,
        goal=_goal(role, None, None),
        backstory=_backstory(role, None, None),
        agent_id=node.agent_id,
        verbose=options.verbose,
        allow_delegation=True,
        max_iter=DEFAULT_MAX_ITER,
        memory=options.enable_memory,
        cache=options.enable_cache,
    )


def _unique_role(role: str, used: set[str]) -> str:
    """Tasks refer to their agent by role, so roles must not repeat."""
    if role not in used:
        return role
    suffix = 2
    while f"{role} {suffix}" in used:
        suffix += 1
    return f"{role} {suffix}"


def determine_process_type(workflow: WorkflowConfig) -> CrewProcess:
    """Sequential only for a strict chain: every node has in- and out-degree <= 1."""
    incoming = in_degrees(workflow)
    outgoing = out_degrees(workflow)
    is_chain = all(
        incoming[node.id] <= 1 and outgoing[node.id] <= 1 for node in workflow.nodes
    )
    return "sequential" if is_chain else "hierarchical"


def map_workflow_to_crew(
    workflow: WorkflowConfig,
    options: CrewAIAdapterOptions | None = None,
) -> Crew:
    """Map a validated workflow to a CrewAI crew document."""
    options = options or CrewAIAdapterOptions()
    process = options.process or determine_process_type(workflow)

    node_index = workflow.node_index()
    preds = predecessors(workflow)

    agents: list[CrewAgent] = []
    tasks: list[CrewTask] = []
    used_roles: set[str] = set()

    for position, node in enumerate(workflow.nodes, start=1):
        if not node.is_agent:
            continue

        # context: agent predecessors only, each listed once
        context: list[str] = []
        for source_id in preds.get(node.id, []):
            source = node_index.get(source_id)
            if source is None:
                logger.warning("ignoring unknown predecessor %s of %s", source_id, node.id)
                continue
            if source.is_agent and source_id not in context:
                context.append(source_id)

        if node.agent is not None:
            crew_agent = map_agent_to_crew_agent(node.agent, options)
            description = (
                node.agent.system_prompt or node.agent.description or f"Execute task {position}"
            )
            task_tools = [tool.name for tool in node.agent.tools] if node.agent.tools else None
        else:
            crew_agent = _late_bound_crew_agent(node, options)
            description = f"Execute task {position}"
            task_tools = None

        crew_agent.role = _unique_role(crew_agent.role, used_roles)
        used_roles.add(crew_agent.role)
        agents.append(crew_agent)
        tasks.append(
            CrewTask(
                id=node.id,
                description=description,
                expected_output=_expected_output(crew_agent.role),
                agent=crew_agent.role,
                tools=task_tools,
                context=context,
                async_execution=process == "hierarchical",
            )
        )

    logger.debug(
        "mapped workflow %s to crew: %d agents, process=%s", workflow.id, len(agents), process
    )
    return Crew(
        name=workflow.name or workflow.id,
        agents=agents,
        tasks=tasks,
        process=process,
        verbose=options.verbose,
        memory=options.enable_memory,
        cache=options.enable_cache,
        max_rpm=options.max_rpm,
        share_crew_ai=False,
    )


class CrewAIAdapter:
    """CrewAI target: map_agent -> CrewAgent, map_workflow -> Crew."""

    name = "crewai"
    options_class = CrewAIAdapterOptions

    def map_agent(self, agent: AgentConfig, options: CrewAIAdapterOptions | None = None) -> CrewAgent:
        return map_agent_to_crew_agent(agent, options)

    def map_workflow(self, workflow: WorkflowConfig, options: CrewAIAdapterOptions | None = None) -> Crew:
        return map_workflow_to_crew(workflow, options)
