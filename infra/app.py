"""
CDK app entry point: `cdk deploy` (see cdk.json).
"""
import aws_cdk as cdk

from infra.stack import WeatherMcpStack

app = cdk.App()
WeatherMcpStack(app, "WeatherMcpStack")
app.synth()
