"""
Pulumi component resources for the sample stacks.

Each submodule provides ComponentResource classes for one resource family:
- configuration: SSM parameters
- security: Secrets Manager
- messaging: SQS queues, SNS topics and subscriptions

`stack.DeclaredStackComponent` provisions a whole declaration set.
"""
