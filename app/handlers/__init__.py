"""AWS Lambda event handlers of the application.

Each top level package in `app.handlers` corresponds to a CloudFormation stack
in `cloudformation/`. Eg. `app.handlers.cognito` holds the user pool triggers
of the `cognito` stack.

Handlers may import names from peer modules or common modules, but may not
import from other handler packages.

"""
