"""Tests for the n8n adapter."""

import logging

from agentgraph.adapters.n8n import (
    AGENT_NODE_TYPE,
    N8nAdapter,
    N8nAdapterOptions,
    calculate_node_positions,
    map_agent_to_n8n_node,
    map_workflow_to_n8n,
)
from agentgraph.models.agent_config import AgentConfig
from agentgraph.models.workflow import WorkflowConfig, WorkflowConnection


def _simple_chain(make_workflow, **extra) -> WorkflowConfig:
    return make_workflow(
        [
            {"id": "start", "type": "trigger"},
            "agent1",
            {"id": "end", "type": "end"},
        ],
        [("start", "agent1"), ("agent1", "end")],
        **extra,
    )


class TestMapAgent:
    """Test mapping a single agent to an n8n unit."""

    def test_agent_unit(self, research_agent):
        node = map_agent_to_n8n_node(AgentConfig.model_validate(research_agent))

        assert node.name == "Research Agent"
        assert node.type == AGENT_NODE_TYPE
        assert node.type_version == 1
        assert node.position == (250, 300)
        assert node.parameters["agentId"] == "researcher"
        assert node.parameters["systemPrompt"] == "You are an expert researcher"
        assert node.parameters["temperature"] == 0.3
        assert node.parameters["maxTokens"] == 2000
        assert node.parameters["topP"] == 1.0
        assert node.parameters["tools"] == [
            {"name": "search", "description": "Search the web", "parameters": {"query": "string"}}
        ]
        assert node.parameters["memory"] == {"type": "buffer", "maxMessages": 10}

    def test_credentials_by_provider(self, research_agent, writer_agent):
        openai_node = map_agent_to_n8n_node(AgentConfig.model_validate(research_agent))
        anthropic_node = map_agent_to_n8n_node(AgentConfig.model_validate(writer_agent))

        assert openai_node.to_dict()["credentials"] == {
            "openAiApi": {"id": "1", "name": "openai Account"}
        }
        assert list(anthropic_node.credentials) == ["anthropicApi"]

    def test_custom_provider_gets_no_credentials(self, writer_agent):
        agent = AgentConfig.model_validate({**writer_agent, "provider": "custom"})
        assert map_agent_to_n8n_node(agent).credentials is None

    def test_credentials_can_be_disabled(self, research_agent):
        node = map_agent_to_n8n_node(
            AgentConfig.model_validate(research_agent),
            N8nAdapterOptions(include_credentials=False),
        )
        assert node.credentials is None

    def test_missing_text_fields_default_to_empty(self, writer_agent):
        node = map_agent_to_n8n_node(AgentConfig.model_validate(writer_agent))

        assert node.parameters["description"] == ""
        assert node.parameters["systemPrompt"] == ""
        assert "temperature" not in node.parameters


class TestMapWorkflow:
    """Test mapping whole workflows."""

    def test_simple_chain(self, make_workflow):
        result = map_workflow_to_n8n(_simple_chain(make_workflow))

        assert [node.name for node in result.nodes] == ["Trigger start", "Agent agent1", "End end"]
        assert [node.position for node in result.nodes] == [(250, 300), (470, 300), (690, 300)]
        assert result.connections["Trigger start"].main[0][0].node == "Agent agent1"
        assert result.connections["Agent agent1"].main[0][0].node == "End end"
        assert "End end" not in result.connections
        assert result.active is False

    def test_unit_types(self, make_workflow):
        result = map_workflow_to_n8n(
            make_workflow(
                [
                    {"id": "start", "type": "trigger"},
                    {"id": "check", "type": "condition"},
                    {"id": "each", "type": "loop"},
                    {"id": "done", "type": "end"},
                ]
            )
        )
        assert [node.type for node in result.nodes] == [
            "n8n-nodes-base.manualTrigger",
            "n8n-nodes-base.if",
            "n8n-nodes-base.splitInBatches",
            "n8n-nodes-base.noOp",
        ]

    def test_late_bound_agent_unit(self, make_workflow):
        result = map_workflow_to_n8n(make_workflow(["agent1"]))
        node = result.nodes[0]

        assert node.type == AGENT_NODE_TYPE
        assert node.parameters == {"agentId": "agent1-agent"}
        assert node.credentials is None

    def test_inline_agent_unit(self, make_workflow, research_agent):
        result = map_workflow_to_n8n(
            make_workflow([{"id": "r", "type": "agent", "agent": research_agent}])
        )
        node = result.nodes[0]

        assert node.name == "Research Agent"
        assert "openAiApi" in node.credentials

    def test_webhook_trigger(self, make_workflow):
        workflow = _simple_chain(
            make_workflow,
            trigger={
                "type": "webhook",
                "config": {"webhookUrl": "https://example.com/hook", "httpMethod": "POST"},
            },
        )
        trigger = map_workflow_to_n8n(workflow).nodes[0]

        assert trigger.type == "n8n-nodes-base.webhook"
        assert trigger.parameters == {"path": "https://example.com/hook", "httpMethod": "POST"}

    def test_schedule_trigger(self, make_workflow):
        workflow = _simple_chain(
            make_workflow,
            trigger={"type": "schedule", "config": {"schedule": "0 9 * * *"}},
        )
        trigger = map_workflow_to_n8n(workflow).nodes[0]

        assert trigger.type == "n8n-nodes-base.scheduleTrigger"
        assert trigger.parameters == {"rule": "0 9 * * *"}

    def test_default_settings(self, make_workflow):
        result = map_workflow_to_n8n(make_workflow(["a"]))
        assert result.settings.to_dict() == {
            "executionOrder": "v1",
            "saveExecutionProgress": True,
            "saveManualExecutions": True,
        }

    def test_tags_from_metadata(self, make_workflow):
        result = map_workflow_to_n8n(make_workflow(["a"], metadata={"tags": ["demo"]}))
        assert result.tags == ["demo"]

    def test_duplicate_unit_names_get_suffix(self, make_workflow, writer_agent):
        """Two inline agents with the same name still get distinct unit names."""
        workflow = make_workflow(
            [
                {"id": "w1", "type": "agent", "agent": writer_agent},
                {"id": "w2", "type": "agent", "agent": writer_agent},
            ],
            [("w1", "w2")],
        )
        result = map_workflow_to_n8n(workflow)

        assert [node.name for node in result.nodes] == ["Writer Agent", "Writer Agent 2"]
        assert result.connections["Writer Agent"].main[0][0].node == "Writer Agent 2"

    def test_unresolved_connection_dropped_with_warning(self, make_workflow, caplog):
        """Connections that skip validation and point nowhere are dropped."""
        valid = make_workflow(["a", "b"], [("a", "b")])
        workflow = WorkflowConfig.model_construct(
            **{
                **dict(valid),
                "connections": [
                    *valid.connections,
                    WorkflowConnection(id="bad", source_id="a", target_id="ghost"),
                ],
            }
        )

        with caplog.at_level(logging.WARNING, logger="agentgraph.adapters.n8n"):
            result = map_workflow_to_n8n(workflow)

        assert [c.node for c in result.connections["Agent a"].main[0]] == ["Agent b"]
        assert "dropping connection bad" in caplog.text

    def test_adapter_class_delegates(self, make_workflow):
        adapter = N8nAdapter()
        result = adapter.map_workflow(make_workflow(["a"]))

        assert adapter.name == "n8n"
        assert result.nodes[0].name == "Agent a"


class TestNodePositions:
    """Test the breadth-first layout."""

    def test_siblings_stack_vertically(self, make_workflow):
        workflow = make_workflow(["a", "b", "c"], [("a", "b"), ("a", "c")])
        positions = calculate_node_positions(workflow)

        assert positions == {"a": (250, 300), "b": (470, 300), "c": (470, 400)}

    def test_custom_start_and_spacing(self, make_workflow):
        workflow = make_workflow(["a", "b"], [("a", "b")])
        positions = calculate_node_positions(workflow, start_position=(0, 0), spacing=100)

        assert positions == {"a": (0, 0), "b": (100, 0)}

    def test_unreachable_cycle_falls_back_to_row(self, make_workflow):
        """Nodes only reachable through a cycle are placed along the first row."""
        workflow = make_workflow(["x", "y"], [("x", "y"), ("y", "x")])

        assert calculate_node_positions(workflow) == {}
        result = map_workflow_to_n8n(workflow)
        assert [node.position for node in result.nodes] == [(250, 300), (470, 300)]
