from unittest.mock import patch

import delete_stack as m

from tests import TestBase


class TestDeleteStack(TestBase):
    _to_patch = [
        'delete_stack.boto3'
    ]

    def test_deletes_and_waits(self):
        boto3 = self._mocks['boto3']
        client = boto3.client.return_value
        m.delete_stack('CognitoService-Dev', delay=1)
        boto3.client.assert_called_once_with('cloudformation')
        client.delete_stack.assert_called_once_with(
            StackName='CognitoService-Dev')
        client.get_waiter.assert_called_once_with('stack_delete_complete')
        client.get_waiter.return_value.wait.assert_called_once_with(
            StackName='CognitoService-Dev', WaiterConfig={'Delay': 1})

    @patch('delete_stack.delete_stack')
    def test_main_dev_only(self, delete_stack):
        self.assertEqual(m.main(['-n', 'cognito']), 0)
        delete_stack.assert_called_once_with('CognitoService-Dev')

    def test_main_unknown_service(self):
        with self.assertRaises(SystemExit):
            m.main(['-n', 'api'])
