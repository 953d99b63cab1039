"""
Pulumi infrastructure-as-code for the sample applications.

This package declares AWS infrastructure including:
- Parameter Store entries for the parameter store sample
- A Secrets Manager secret with a generated password
- An SNS topic with queue and URL subscriptions
- Stack-scoped SQS queues

Declarations are pure data (`samples_iac.core`, `samples_iac.declarations`);
`samples_iac.components` hands them to Pulumi.
"""
