class FieldsetMixin:
    """
    Mixin that trims serializer output to a named view mode.

    The view mode comes from `context['view_mode']`; the allowed fields for
    each mode live on `Meta.fieldsets`.

    Usage:
        class OrderSerializer(FieldsetMixin, serializers.ModelSerializer):
            class Meta:
                model = Order
                fields = [...]
                fieldsets = {
                    'customer': ['id', 'status', 'restaurant', 'items'],
                    'restaurant': ['id', 'status', 'customer', 'items'],
                }
                required_fields = {'id'}
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._apply_fieldset_filtering()

    def _apply_fieldset_filtering(self):
        """
        Apply fieldset based on view_mode from context.

        Required fields are always preserved, even if missing from the fieldset.
        """
        view_mode = self.context.get('view_mode')
        fieldsets = getattr(self.Meta, 'fieldsets', {})

        if not view_mode or view_mode not in fieldsets:
            return

        fieldset_value = fieldsets[view_mode]
        if fieldset_value == '__all__':
            return

        required_fields = getattr(self.Meta, 'required_fields', {'id'})
        allowed = set(fieldset_value) | required_fields
        existing = set(self.fields.keys())

        for field_name in existing - allowed:
            self.fields.pop(field_name)
