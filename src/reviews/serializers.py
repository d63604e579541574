from rest_framework import serializers


class GoogleReviewSerializer(serializers.Serializer):
    author_name = serializers.CharField(required=False, allow_blank=True)
    author_url = serializers.CharField(required=False, allow_blank=True)
    profile_photo_url = serializers.CharField(required=False, allow_blank=True)
    rating = serializers.IntegerField(required=False)
    relative_time_description = serializers.CharField(required=False, allow_blank=True)
    text = serializers.CharField(required=False, allow_blank=True)
    time = serializers.IntegerField(required=False)


class PlaceReviewsSerializer(serializers.Serializer):
    reviews = GoogleReviewSerializer(many=True)
    rating = serializers.FloatField()
    total_reviews = serializers.IntegerField()
