#!/usr/bin/env python3
"""CDK entry point for the static site."""

import logging

import aws_cdk as cdk

from infra.config import get_site_config
from infra.stacks.site_stack import StaticSiteStack

logging.basicConfig(level=logging.INFO, format="[%(name)s] %(levelname)s %(message)s")

app = cdk.App()
config = get_site_config()

env = cdk.Environment(account=config["account"], region=config["region"])

site = StaticSiteStack(app, config["stack_name"], config=config, env=env)

app.synth()
