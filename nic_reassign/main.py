"""
NIC Reassign - Main Entry Point

Simple entry points for reassign and revert runs.

Usage:
    from nic_reassign.main import reassign_nic, revert_nic
    from nic_reassign.core.config import create_config

    config = create_config('10.0.0.4', '10.0.0.5', '10.0.0.9', subscription_id='...')
    outcome = reassign_nic(config)
    outcome = revert_nic(config)
"""

import sys

from nic_reassign.core.auth import AuthManager, get_default_subscription
from nic_reassign.core.config import ReassignConfig, RunMode
from nic_reassign.core.exceptions import NicReassignError
from nic_reassign.operations import AzureOperationClient
from nic_reassign.orchestration import ReassignOrchestrator, RevertOrchestrator, RunOutcome, RunState
from nic_reassign.utils.logger import print_header, setup_logging
from nic_reassign.validators import ValidationRunner, address_validators


def run(config: ReassignConfig, auth: AuthManager = None) -> RunOutcome:
    """
    Run a reassign or revert, depending on config.mode.

    On failure of any forward step, completed steps are rolled back
    automatically.

    Args:
        config: Run configuration
        auth: Optional AuthManager (a new one is created if not provided)

    Returns:
        RunOutcome; outcome.exit_code is the process exit code

    Example:
        >>> outcome = run(config)
        >>> outcome.state
        <RunState.SUCCEEDED: 'succeeded'>
    """

    logger = setup_logging(log_file=config.log_file, verbose=config.verbose)

    title = "Revert" if config.is_revert else "Reassign"
    print_header(logger, f"NIC Reassign - {title}")
    logger.info(f"Original ZCA IP: {config.original_zca_ip}")
    logger.info(f"Original ZVM appliance IP: {config.original_appliance_ip}")
    logger.info(f"Alternative ZCA IP: {config.alternative_zca_ip}")
    logger.info("")

    # Addresses are checked before anything talks to Azure
    results = ValidationRunner(address_validators(config.addresses)).run_all(logger)
    if not results.all_passed():
        results.log_failures(logger)
        return RunOutcome(state=RunState.FAILED)

    try:
        auth = auth or AuthManager()
        subscription_id = config.subscription_id or get_default_subscription()
        compute, network, subscription = auth.get_clients(subscription_id)
        logger.debug(f"Using subscription: {subscription}")

        client = AzureOperationClient(compute, network, logger)

        orchestrator_class = RevertOrchestrator if config.mode is RunMode.REVERT else ReassignOrchestrator
        orchestrator = orchestrator_class(
            client,
            config,
            logger=logger,
            credential=auth.get_credential(),
            show_progress=not config.verbose and sys.stdout.isatty()
        )

        return orchestrator.run()

    except NicReassignError as e:
        logger.error(str(e))
        return RunOutcome(state=RunState.FAILED)

    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}")
        if config.verbose:
            logger.exception("Full traceback:")
        return RunOutcome(state=RunState.FAILED)


def reassign_nic(config: ReassignConfig, auth: AuthManager = None) -> RunOutcome:
    """
    Move the Windows ZCA NIC to the Linux ZCA appliance VM.

    This will:
    1. Validate the addresses and credentials
    2. Resolve both VMs and check resource group, region and subnet
    3. Create an alternative NIC for the Windows ZCA VM
    4. Deallocate both VMs
    5. Swap the NICs
    6. Start both VMs (without waiting for them to boot)

    Args:
        config: Run configuration (mode is forced to APPLY)
        auth: Optional AuthManager

    Returns:
        RunOutcome
    """
    config.mode = RunMode.APPLY
    return run(config, auth)


def revert_nic(config: ReassignConfig, auth: AuthManager = None) -> RunOutcome:
    """
    Undo a previous reassign run made with the same three addresses.

    Args:
        config: Run configuration (mode is forced to REVERT)
        auth: Optional AuthManager

    Returns:
        RunOutcome
    """
    config.mode = RunMode.REVERT
    return run(config, auth)
