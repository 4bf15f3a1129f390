"""Dart source templates written into generated projects.

Parameterized templates use ``{{ placeholder|filter }}`` expressions rendered
by :class:`~flutter_scaffold.template.TemplateRenderer`. The ``*_SOURCE``
constants are written verbatim.
"""

from __future__ import annotations

REPOSITORY_TEMPLATE = """class {{ feature.name|pascal }}Repository {
  // TODO: Implement repository
}
"""

MODEL_TEMPLATE = """class {{ feature.name|pascal }}Model {
  // TODO: Implement model
}
"""

SCREEN_TEMPLATE = """import 'package:flutter/material.dart';

class {{ feature.name|pascal }}Screen extends StatelessWidget {
  const {{ feature.name|pascal }}Screen({super.key});

  @override
  Widget build(BuildContext context) {
    return Scaffold(
      appBar: AppBar(
        title: const Text('{{ feature.name|pascal }}'),
      ),
      body: const Center(
        child: Text('{{ feature.name|pascal }}Screen'),
      ),
    );
  }
}
"""

CONTROLLER_TEMPLATE = """import 'package:flutter_riverpod/flutter_riverpod.dart';

final {{ feature.name }}Controller = StateNotifierProvider<{{ feature.name|pascal }}Notifier, {{ feature.name|pascal }}State>((ref) {
  return {{ feature.name|pascal }}Notifier();
});

class {{ feature.name|pascal }}State {
  // TODO: Implement state
}

class {{ feature.name|pascal }}Notifier extends StateNotifier<{{ feature.name|pascal }}State> {
  {{ feature.name|pascal }}Notifier() : super({{ feature.name|pascal }}State());

  // TODO: Implement methods
}
"""

APP_THEME_SOURCE = """import 'package:flutter/material.dart';
import 'package:shadcn_ui/shadcn_ui.dart';

class AppColors {
  AppColors._init();
  static AppColors instance = AppColors._init();

  final _theme = ShadThemeData(
    brightness: Brightness.light,
    colorScheme: const ShadSlateColorScheme.light(),
  );

  final _themeDark = ShadThemeData(
    brightness: Brightness.dark,
    colorScheme: const ShadSlateColorScheme.dark(),
  );

  ShadThemeData get theme => _theme;
  ShadThemeData get themeDark => _themeDark;
}
"""

APP_COLORS_SOURCE = """class AppColors {
  // TODO: Define app colors
}
"""

APP_STRINGS_SOURCE = """class AppStrings {
  // TODO: Define app strings
}
"""

LOGGING_SOURCE = """class Logger {
  // TODO: Implement logging
}
"""

PERMISSIONS_SOURCE = r"""import 'dart:io' show Platform, exit;

import 'package:device_info_plus/device_info_plus.dart';
import 'package:flutter/material.dart';
import 'package:flutter/services.dart';
import 'package:hooks_riverpod/hooks_riverpod.dart';
import 'package:permission_handler/permission_handler.dart';

final permissionUtilProvider =
    StateNotifierProvider<PermissionUtil, bool>((ref) => PermissionUtil());

class PermissionUtil extends StateNotifier<bool> {
  PermissionUtil() : super(false);

  Future<List<Permission>> get _requiredPermissions async {
    if (Platform.isAndroid) {
      if (await _getAndroidSdkVersion() >= 33) {
        // Android 13 and above
        return [
          Permission.photos,
          Permission.videos,
          Permission.activityRecognition,
        ];
      } else if (await _getAndroidSdkVersion() >= 29) {
        // Android 10-12
        return [
          Permission.storage,
          Permission.activityRecognition,
        ];
      } else {
        // Below Android 10
        return [
          Permission.storage,
          Permission.activityRecognition,
        ];
      }
    } else if (Platform.isIOS) {
      return [
        Permission.photos,
        Permission.sensors,
      ];
    }
    return [];
  }

  Future<int> _getAndroidSdkVersion() async {
    try {
      if (Platform.isAndroid) {
        final deviceInfo = DeviceInfoPlugin();
        final androidInfo = await deviceInfo.androidInfo;
        return androidInfo.version.sdkInt;
      }
    } catch (e) {
      print('Error getting Android SDK version: $e');
    }
    return 29;
  }

  Future<bool> requestPermissions() async {
    try {
      final permissions = await _requiredPermissions;
      if (permissions.isEmpty) return false;

      final statuses = await permissions.request();
      return statuses.values.every((status) => status.isGranted);
    } catch (e) {
      print('Error requesting permissions: $e');
      return false;
    }
  }

  Future<bool> checkPermissions() async {
    try {
      final permissions = await _requiredPermissions;
      if (permissions.isEmpty) return false;

      final statuses = await Future.wait(
        permissions.map((permission) => permission.status),
      );
      return statuses.every((status) => status.isGranted);
    } catch (e) {
      print('Error checking permissions: $e');
      return false;
    }
  }

  Future<void> openSettings() async {
    try {
      await openAppSettings();
    } catch (e) {
      print('Error opening settings: $e');
    }
  }

  Future<void> checkAndRequestPermissions(
    BuildContext context,
    WidgetRef ref,
  ) async {
    final hasPermissions = await checkPermissions();
    if (!hasPermissions) {
      final granted = await requestPermissions();
      if (!granted) {
        if (context.mounted) {
          await showPermissionDialog(context, ref);
        }
      } else {
        state = true;
      }
    } else {
      state = true;
    }
  }

  Future<void> showPermissionDialog(BuildContext context, WidgetRef ref) async {
    return showDialog(
      context: context,
      barrierDismissible: false,
      builder: (BuildContext context) {
        return AlertDialog(
          content: const Text(
              'This app needs access to storage and activity recognition to track your steps. '
              'Please grant the required permissions in settings.'),
          actions: <Widget>[
            TextButton(
              child: const Text('Open Settings'),
              onPressed: () async {
                Navigator.of(context).pop();
                await openSettings();
                if (context.mounted) {
                  await checkAndRequestPermissions(context, ref);
                }
              },
            ),
            TextButton(
              child: const Text('Exit App'),
              onPressed: () async {
                try {
                  await SystemChannels.platform
                      .invokeMethod('SystemNavigator.pop');
                } catch (e) {
                  exit(0);
                }
              },
            ),
          ],
        );
      },
    );
  }
}
"""

CUSTOM_BUTTON_SOURCE = """import 'package:flutter/material.dart';

class CustomButton extends StatelessWidget {
  final String text;
  final VoidCallback onPressed;
  final bool isLoading;

  const CustomButton({
    super.key,
    required this.text,
    required this.onPressed,
    this.isLoading = false,
  });

  @override
  Widget build(BuildContext context) {
    return ElevatedButton(
      onPressed: isLoading ? null : onPressed,
      child: isLoading
          ? const CircularProgressIndicator()
          : Text(text),
    );
  }
}
"""

AUTH_SERVICE_SOURCE = r"""import 'package:logging/logging.dart';
import 'package:supabase_flutter/supabase_flutter.dart';

class AuthService {
  AuthService(this.supabase);
  final SupabaseClient supabase;
  final _logger = Logger('AuthService');

  Future<bool> signIn(String email, String password) async {
    try {
      final response = await supabase.auth.signInWithPassword(
        email: email,
        password: password,
      );
      _logger.info('Sign in response: $response');
      return response.user != null;
    } on AuthException catch (e) {
      _logger.severe('Sign in error: ${e.message}');
      return false;
    } catch (e) {
      _logger.severe('Sign in error: $e');
      return false;
    }
  }

  Future<bool> signUp(String email, String password) async {
    try {
      final response = await supabase.auth.signUp(
        email: email,
        password: password,
      );
      _logger.info('Sign up response: $response');
      return response.user != null;
    } on AuthException catch (e) {
      _logger.severe('Sign up error: ${e.message}');
      return false;
    } on PostgrestException catch (e) {
      _logger.severe('Database error: ${e.message}');
      return false;
    } catch (e) {
      _logger.severe('Sign up error: $e');
      return false;
    }
  }

  Future<bool> resetPassword(String email) async {
    try {
      await supabase.auth.resetPasswordForEmail(email);
      _logger.info('Password reset email sent to: $email');
      return true;
    } catch (e) {
      _logger.severe('Reset password error: $e');
      return false;
    }
  }

  Future<bool> signOut() async {
    try {
      await supabase.auth.signOut();
      _logger.info('User signed out successfully');
      return true;
    } catch (e) {
      _logger.severe('Sign out error: $e');
      return false;
    }
  }

  User? getCurrentUser() => supabase.auth.currentUser;

  bool isLoggedIn() => supabase.auth.currentUser != null;
}
"""

AUTH_SERVICE_PROVIDER_TEMPLATE = """import 'package:hooks_riverpod/hooks_riverpod.dart';
import 'package:riverpod_annotation/riverpod_annotation.dart';
import 'package:{{ project_name }}/core/services/auth_service.dart';
import 'package:supabase_flutter/supabase_flutter.dart';

part 'auth_service_provider.g.dart';

@Riverpod(keepAlive: true)
AuthService authService(Ref ref) {
  final supabase = Supabase.instance.client;
  return AuthService(supabase);
}
"""

APP_SOURCE = """import 'package:flutter/material.dart';
import 'package:flutter_riverpod/flutter_riverpod.dart';
import 'package:shadcn_ui/shadcn_ui.dart';

import '../core/constants/app_theme.dart';
import 'router.dart';

final themeModeProvider = StateProvider<ThemeMode>((ref) => ThemeMode.dark);

class App extends ConsumerWidget {
  const App({super.key});

  @override
  Widget build(BuildContext context, WidgetRef ref) {
    final themeMode = ref.watch(themeModeProvider);
    final goRouter = ref.watch(goRouterProvider);

    return ShadApp.router(
      debugShowCheckedModeBanner: false,
      darkTheme: AppColors.instance.themeDark,
      theme: AppColors.instance.theme,
      themeMode: themeMode,
      routerConfig: goRouter,
    );
  }
}
"""

THEME_SOURCE = """import 'package:flutter/material.dart';

// TODO: Implement theme
"""

MAIN_SOURCE = """import 'package:flutter/material.dart';
import 'package:flutter_riverpod/flutter_riverpod.dart';

import 'app/app.dart';

void main() async {
  runApp(
    const ProviderScope(
      child: App(),
    ),
  );
}
"""

MAIN_BACKEND_SOURCE = """import 'package:flutter/material.dart';
import 'package:flutter_dotenv/flutter_dotenv.dart';
import 'package:flutter_riverpod/flutter_riverpod.dart';
import 'package:supabase_flutter/supabase_flutter.dart';

import 'app/app.dart';

void main() async {
  WidgetsFlutterBinding.ensureInitialized();
  await dotenv.load();
  await Supabase.initialize(
    url: dotenv.env['SUPABASE_URL'] ?? '',
    anonKey: dotenv.env['SUPABASE_ANON_KEY'] ?? '',
  );

  runApp(
    const ProviderScope(
      child: App(),
    ),
  );
}
"""

ENV_SOURCE = """SUPABASE_URL=your_supabase_url
SUPABASE_ANON_KEY=your_supabase_anon_key
"""

PLACEHOLDER_ROUTER_SOURCE = """import 'package:go_router/go_router.dart';

// TODO: Implement router
"""
