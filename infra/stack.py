"""
CDK stack: the hello and weather MCP services as two Lambda functions behind
the Lambda Web Adapter, each with a public function URL.
"""
from pathlib import Path

import aws_cdk as cdk
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from constructs import Construct

PROJECT_ROOT = Path(__file__).resolve().parent.parent

ADAPTER_LAYER_ACCOUNT = "753240598075"
DEFAULT_ADAPTER_LAYER_VERSION = 25

# service id -> directory under bin/ holding its run.sh
SERVICES = {
    "HelloService": "hello",
    "WeatherMcpServer": "weather",
}


def adapter_layer_arn(region: str, version: int) -> str:
    return f"arn:aws:lambda:{region}:{ADAPTER_LAYER_ACCOUNT}:layer:LambdaAdapterLayerArm64:{version}"


def service_code(service: str) -> lambda_.Code:
    """Install the package into the asset and drop the service's run.sh at its root."""
    return lambda_.Code.from_asset(
        str(PROJECT_ROOT),
        exclude=["cdk.out", "tests", ".venv", "**/__pycache__"],
        bundling=cdk.BundlingOptions(
            image=lambda_.Runtime.PYTHON_3_12.bundling_image,
            platform="linux/arm64",
            command=[
                "bash", "-c",
                f"pip install --no-cache-dir . -t /asset-output && cp bin/{service}/run.sh /asset-output/run.sh",
            ],
        ),
    )


class WeatherMcpStack(cdk.Stack):

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        layer_version = int(
            self.node.try_get_context("adapterLayerVersion") or DEFAULT_ADAPTER_LAYER_VERSION
        )
        web_adapter_layer = lambda_.LayerVersion.from_layer_version_arn(
            self, "WebAdapterLayer", adapter_layer_arn(self.region, layer_version)
        )

        self.functions: dict[str, lambda_.Function] = {}
        for construct_name, service in SERVICES.items():
            log_group = logs.LogGroup(
                self, f"{construct_name}Logs",
                retention=logs.RetentionDays.ONE_DAY,
                removal_policy=cdk.RemovalPolicy.DESTROY,
            )
            fn = lambda_.Function(
                self, construct_name,
                runtime=lambda_.Runtime.PYTHON_3_12,
                architecture=lambda_.Architecture.ARM_64,
                code=service_code(service),
                handler="run.sh",
                layers=[web_adapter_layer],
                environment={
                    "AWS_LAMBDA_EXEC_WRAPPER": "/opt/bootstrap",
                    "AWS_LWA_INVOKE_MODE": "response_stream",
                    "PORT": "8080",
                },
                memory_size=256,
                timeout=cdk.Duration.seconds(10),
                log_group=log_group,
            )
            url = fn.add_function_url(
                auth_type=lambda_.FunctionUrlAuthType.NONE,
                invoke_mode=lambda_.InvokeMode.RESPONSE_STREAM,
            )
            cdk.CfnOutput(self, f"{construct_name}Url", value=url.url)
            self.functions[service] = fn
