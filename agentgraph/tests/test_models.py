"""Tests for agent and workflow model parsing and invariants."""

import pytest
from pydantic import ValidationError

from agentgraph.models.agent_config import AgentConfig, PartialAgentConfig
from agentgraph.models.workflow import TriggerConfig, WorkflowConfig, WorkflowNode


class TestAgentConfig:
    """Test the agent descriptor model."""

    def test_accepts_camel_case_keys(self, research_agent):
        """camelCase input keys should map to snake_case attributes."""
        agent = AgentConfig.model_validate(research_agent)

        assert agent.system_prompt == "You are an expert researcher"
        assert agent.parameters.max_tokens == 2000
        assert agent.memory.max_messages == 10
        assert agent.tools[0].name == "search"

    def test_accepts_snake_case_keys(self):
        """snake_case keys should be accepted as well."""
        agent = AgentConfig(
            id="a1",
            name="Agent",
            provider="google",
            model="gemini-pro",
            system_prompt="Be brief.",
        )
        assert agent.system_prompt == "Be brief."

    def test_dump_uses_camel_case(self, research_agent):
        """to_dict should emit camelCase keys and drop unset fields."""
        dumped = AgentConfig.model_validate(research_agent).to_dict()

        assert dumped["systemPrompt"] == "You are an expert researcher"
        assert dumped["parameters"] == {"temperature": 0.3, "maxTokens": 2000}
        assert "connections" not in dumped

    def test_rejects_unknown_provider(self):
        """provider must be one of the supported providers."""
        with pytest.raises(ValidationError) as exc_info:
            AgentConfig.model_validate(
                {"id": "a", "name": "A", "provider": "acme", "model": "m1"}
            )
        assert "provider" in str(exc_info.value)

    def test_rejects_out_of_range_parameters(self):
        """temperature above 2 and top_p above 1 should fail."""
        with pytest.raises(ValidationError):
            AgentConfig.model_validate(
                {
                    "id": "a",
                    "name": "A",
                    "provider": "openai",
                    "model": "gpt-4",
                    "parameters": {"temperature": 2.5},
                }
            )
        with pytest.raises(ValidationError):
            AgentConfig.model_validate(
                {
                    "id": "a",
                    "name": "A",
                    "provider": "openai",
                    "model": "gpt-4",
                    "parameters": {"topP": 1.5},
                }
            )

    def test_rejects_empty_identifiers(self):
        """id, name and model must be non-empty."""
        with pytest.raises(ValidationError):
            AgentConfig.model_validate({"id": "", "name": "A", "provider": "openai", "model": "gpt-4"})

    def test_partial_config_allows_missing_fields(self):
        """PartialAgentConfig should accept any subset of fields."""
        partial = PartialAgentConfig.model_validate({"parameters": {"temperature": 0.9}})
        assert partial.parameters.temperature == 0.9
        assert partial.id is None

    def test_agent_is_immutable(self, writer_agent):
        """Parsed agents should be frozen."""
        agent = AgentConfig.model_validate(writer_agent)
        with pytest.raises(ValidationError):
            agent.name = "Changed"


class TestWorkflowInvariants:
    """Test structural invariants enforced while parsing a workflow."""

    def test_minimal_workflow_parses(self, make_workflow_dict):
        """A single agent node with no connections is valid."""
        workflow = WorkflowConfig.model_validate(make_workflow_dict(["a"]))
        assert workflow.nodes[0].agent_id == "a-agent"
        assert workflow.connections == []

    def test_empty_nodes_rejected(self, make_workflow_dict):
        """At least one node is required."""
        with pytest.raises(ValidationError) as exc_info:
            WorkflowConfig.model_validate(make_workflow_dict([]))

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("nodes",)
        assert errors[0]["msg"] == "At least one node is required"

    def test_dangling_connection_rejected(self, make_workflow_dict):
        """Every connection endpoint must name a declared node."""
        with pytest.raises(ValidationError) as exc_info:
            WorkflowConfig.model_validate(make_workflow_dict(["a"], [("a", "ghost")]))

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("connections",)
        assert "existing nodes" in errors[0]["msg"]

    def test_agent_node_without_reference_rejected(self, make_workflow_dict):
        """Agent nodes need an agentId or an inline agent."""
        with pytest.raises(ValidationError) as exc_info:
            WorkflowConfig.model_validate(make_workflow_dict([{"id": "a", "type": "agent"}]))

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("nodes",)
        assert "agentId or agent configuration" in errors[0]["msg"]

    def test_empty_agent_id_is_not_a_reference(self, make_workflow_dict):
        """An empty agentId counts as no reference at all."""
        node = {"id": "a", "type": "agent", "agentId": ""}
        with pytest.raises(ValidationError) as exc_info:
            WorkflowConfig.model_validate(make_workflow_dict([node]))

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("nodes",)
        assert "agentId or agent configuration" in errors[0]["msg"]

    def test_empty_agent_id_with_inline_agent_accepted(self, make_workflow_dict, writer_agent):
        """An inline agent alongside an empty agentId is a single reference."""
        node = {"id": "a", "type": "agent", "agentId": "", "agent": writer_agent}
        workflow = WorkflowConfig.model_validate(make_workflow_dict([node]))
        assert workflow.nodes[0].agent.id == "writer"

    def test_agent_node_with_both_references_rejected(self, make_workflow_dict, writer_agent):
        """An agent node carries exactly one reference."""
        node = {"id": "a", "type": "agent", "agentId": "writer", "agent": writer_agent}
        with pytest.raises(ValidationError) as exc_info:
            WorkflowConfig.model_validate(make_workflow_dict([node]))
        assert exc_info.value.errors()[0]["loc"] == ("nodes",)

    def test_non_agent_nodes_need_no_reference(self, make_workflow_dict):
        """Trigger, condition, loop and end nodes carry no agent."""
        nodes = [
            {"id": "t", "type": "trigger"},
            {"id": "c", "type": "condition"},
            {"id": "l", "type": "loop"},
            {"id": "e", "type": "end"},
        ]
        workflow = WorkflowConfig.model_validate(make_workflow_dict(nodes))
        assert [node.type for node in workflow.nodes] == ["trigger", "condition", "loop", "end"]

    def test_duplicate_node_ids_rejected(self, make_workflow_dict):
        """Node ids are unique within a workflow."""
        with pytest.raises(ValidationError) as exc_info:
            WorkflowConfig.model_validate(make_workflow_dict(["a", "a"]))
        assert "unique" in exc_info.value.errors()[0]["msg"]

    def test_duplicate_variable_names_rejected(self, make_workflow_dict):
        """Variable names are unique within a workflow."""
        variables = [
            {"name": "topic", "type": "string"},
            {"name": "topic", "type": "number"},
        ]
        with pytest.raises(ValidationError) as exc_info:
            WorkflowConfig.model_validate(make_workflow_dict(["a"], variables=variables))

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("variables",)
        assert "topic" in errors[0]["msg"]

    def test_unknown_node_type_rejected(self, make_workflow_dict):
        """Node type must be one of the known kinds."""
        with pytest.raises(ValidationError):
            WorkflowConfig.model_validate(make_workflow_dict([{"id": "x", "type": "router"}]))

    def test_workflow_is_immutable(self, make_workflow):
        """Parsed workflows should be frozen."""
        workflow = make_workflow(["a"])
        with pytest.raises(ValidationError):
            workflow.name = "Other"

    def test_position_and_metadata_pass_through(self, make_workflow_dict):
        """Position and metadata are carried untouched."""
        node = {
            "id": "a",
            "type": "end",
            "position": {"x": 10, "y": 20},
            "metadata": {"color": "red"},
        }
        workflow = WorkflowConfig.model_validate(make_workflow_dict([node]))
        assert workflow.nodes[0].position.x == 10
        assert workflow.nodes[0].metadata == {"color": "red"}

    def test_lookup_helpers(self, make_workflow):
        """node_index, outgoing and incoming follow declaration order."""
        workflow = make_workflow(["a", "b", "c"], [("a", "b"), ("a", "c"), ("b", "c")])

        assert list(workflow.node_index()) == ["a", "b", "c"]
        assert [c.target_id for c in workflow.outgoing("a")] == ["b", "c"]
        assert [c.source_id for c in workflow.incoming("c")] == ["a", "b"]


class TestTriggerConfig:
    """Test trigger configuration parsing."""

    def test_extra_keys_pass_through(self):
        """Unknown trigger config keys should be preserved."""
        config = TriggerConfig.model_validate({"schedule": "0 9 * * *", "timezone": "UTC"})
        assert config.schedule == "0 9 * * *"
        assert config.extra_items() == {"timezone": "UTC"}

    def test_invalid_webhook_url_rejected(self):
        """webhookUrl must be a URL."""
        with pytest.raises(ValidationError):
            TriggerConfig.model_validate({"webhookUrl": "not a url"})

    def test_valid_webhook_url_kept_verbatim(self):
        """A valid URL is stored as given."""
        config = TriggerConfig.model_validate({"webhookUrl": "https://example.com/hook"})
        assert config.webhook_url == "https://example.com/hook"


class TestWorkflowNode:
    """Test node helpers."""

    def test_is_agent(self):
        assert WorkflowNode(id="a", type="agent", agent_id="x").is_agent
        assert not WorkflowNode(id="t", type="trigger").is_agent
