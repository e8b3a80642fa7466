"""Media browser URL configuration."""

from django.urls import path

from server.apps.media import views

app_name = 'media'

urlpatterns = [
    # Browsing
    path('folder/', views.folder_info, name='folder'),
    path('directories/', views.all_directories, name='directories'),

    # Folder operations
    path('folder/create/', views.create_folder, name='create_folder'),
    path('folder/delete/', views.delete_folder, name='delete_folder'),

    # File operations
    path('file/delete/', views.delete_file, name='delete_file'),
    path('rename/', views.rename, name='rename'),
    path('move/', views.move, name='move'),
    path('upload/', views.upload, name='upload'),
]
