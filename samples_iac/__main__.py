"""
Pulumi program entry point for the sample infrastructure.

Declares every configured sample stack, validates all of them before any
resource is registered, then provisions them:
1. Configuration and logging
2. Declaration sets (one per sample)
3. Stack resource registry for cross-stack lookups
4. Pulumi components and exports
"""

import pulumi

from samples_iac.components.stack import DeclaredStackComponent
from samples_iac.configs.environment import get_config
from samples_iac.core.registry import StackResourceRegistry
from samples_iac.core.stack import Stack
from samples_iac.declarations.catalog import SAMPLE_STACKS, build_sample
from samples_iac.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    """Deploy the sample application infrastructure."""
    config = get_config(available_samples=tuple(SAMPLE_STACKS))
    configure_logging(config.log_level)

    # Declare everything first so a bad sample aborts before provisioning
    declarations = []
    for sample in config.samples:
        stack = Stack(
            stack_id=f"{config.stack_id}-{sample}",
            environment=config.environment,
            region=config.region,
            tags={**config.get_tags(), "Sample": sample},
        )
        declarations.append(
            build_sample(
                sample,
                stack,
                app_name=config.app_name,
                sns_endpoint_url=config.sns_endpoint_url,
            )
        )
        logger.info("Declared sample %s as stack %s", sample, stack.stack_id)

    registry = StackResourceRegistry.from_declarations(*declarations)

    for declaration in declarations:
        component = DeclaredStackComponent(declaration.stack.stack_id, declaration)
        for key, value in component.get_outputs().flatten(declaration.stack.stack_id).items():
            pulumi.export(key, value)

    pulumi.export(
        "physical_names",
        {r.logical_id: r.physical_id for r in registry.all_resources()},
    )
    pulumi.log.info(f"✓ Declared {len(declarations)} sample stacks")


# Execute
main()
